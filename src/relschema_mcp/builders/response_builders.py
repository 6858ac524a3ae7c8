"""Response builders for relschema-mcp.

This module contains builder classes that construct MCP response models
from reflected tables and synthesized statements.
"""

from __future__ import annotations

from relschema_mcp.models import (
    ColumnDetail,
    ForeignKeyRef,
    StatementKind,
    StatementResult,
    TableDescription,
)
from relschema_mcp.reflection.constraints import ordered_constraint_words
from relschema_mcp.reflection.schema import Table
from relschema_mcp.reflection.types import render_type


class TableDescriptionBuilder:
    """Builder for TableDescription objects."""

    @staticmethod
    def build(table: Table) -> TableDescription:
        """Describe a reflected table column by column."""
        pk = table.primary_key_attribute
        columns = [
            ColumnDetail(
                name=attr.name,
                data_type=render_type(attr.data_type),
                constraints=ordered_constraint_words(attr.constraints),
                foreign_keys=[
                    ForeignKeyRef(
                        table=fk.referenced_table or "", column=fk.referenced_attribute or ""
                    )
                    for fk in attr.foreign_keys()
                ],
                is_primary_key=index == table.primary_key,
            )
            for index, attr in enumerate(table.attributes)
        ]
        return TableDescription(
            table=table.name,
            columns=columns,
            primary_key=pk.name if pk is not None else None,
            skipped_columns=list(table.skipped_columns),
        )


class StatementResultBuilder:
    """Builder for StatementResult objects."""

    @staticmethod
    def build(table: Table, kind: StatementKind, sql: str | None) -> StatementResult:
        """Wrap a rendered statement with caveats the caller should know."""
        notes: list[str] = []
        if table.skipped_columns and kind == "create":
            notes.append(
                "Columns with unsupported types are missing from this statement: "
                + ", ".join(table.skipped_columns)
            )
        if kind == "insert":
            if sql is None:
                notes.append("No value matched a column of the table; nothing to insert.")
            else:
                notes.append("Values are inserted verbatim; quote string literals yourself.")
        return StatementResult(table=table.name, kind=kind, sql=sql, notes=notes)

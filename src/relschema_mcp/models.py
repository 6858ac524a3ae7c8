"""Pydantic models for MCP tool I/O.

Minimal, task-focused models used by the MCP server tools and builders.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

StatementKind = Literal["create", "drop", "select", "insert"]


class ForeignKeyRef(BaseModel):
    """A foreign key target referenced by name."""

    table: str = Field(description="Referenced table name")
    column: str = Field(description="Referenced column name")


class ColumnDetail(BaseModel):
    """One reflected column."""

    name: str = Field(description="Column name")
    data_type: str = Field(description="Column type declaration, e.g. 'varchar(255)'")
    constraints: list[str] = Field(
        default_factory=list,
        description="Inline constraint words in rendering order (Unique, Not Null, Auto_increment)",
    )
    foreign_keys: list[ForeignKeyRef] = Field(
        default_factory=list, description="Foreign key targets of this column"
    )
    is_primary_key: bool = Field(default=False, description="True for the primary key column")


class TableDescription(BaseModel):
    """Reflected structure of one table."""

    table: str = Field(description="Table name")
    columns: list[ColumnDetail] = Field(description="Columns in declaration order")
    primary_key: str | None = Field(default=None, description="Primary key column, if any")
    skipped_columns: list[str] = Field(
        default_factory=list,
        description="Columns left out because their type is not supported",
    )


class StatementResult(BaseModel):
    """A synthesized statement for a reflected table."""

    table: str = Field(description="Table the statement targets")
    kind: StatementKind = Field(description="Statement kind")
    sql: str | None = Field(
        default=None, description="Statement text; null when there was nothing to insert"
    )
    notes: list[str] = Field(default_factory=list, description="Caveats for the caller")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="UTC ISO8601 timestamp of completion",
    )

"""Schema service for relschema-mcp.

This module orchestrates table reflection and statement synthesis on top of
a QueryExecutor: reflect a table, render its statements, and optionally run
them through the executor's no-result contract.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastmcp.utilities.logging import get_logger

from relschema_mcp.execute.runner import QueryExecutor, RawRow
from relschema_mcp.models import StatementKind
from relschema_mcp.reflection.builder import reflect_table
from relschema_mcp.reflection.constants import UnknownTypePolicy
from relschema_mcp.reflection.schema import Table
from relschema_mcp.statements.synthesis import (
    render_create,
    render_drop,
    render_insert,
    render_select_all,
)

_logger = get_logger(__name__)


class SchemaService:
    """Service for reflecting tables and producing their statements."""

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        unknown_types: UnknownTypePolicy = UnknownTypePolicy.DROP,
        strict_foreign_keys: bool = True,
    ) -> None:
        """Initialize schema service.

        Args:
            executor: QueryExecutor used for catalog reads and statements
            unknown_types: Policy for columns with unrecognized types
            strict_foreign_keys: Fail on MUL columns without a FOREIGN KEY clause
        """
        self.executor = executor
        self.unknown_types = unknown_types
        self.strict_foreign_keys = strict_foreign_keys

    def reflect(self, table_name: str) -> Table | None:
        """Reflect a table; None when it does not exist."""
        return reflect_table(
            table_name,
            self.executor,
            unknown_types=self.unknown_types,
            strict_foreign_keys=self.strict_foreign_keys,
        )

    def require_table(self, table_name: str) -> Table:
        """Reflect a table, raising LookupError when it does not exist."""
        table = self.reflect(table_name)
        if table is None:
            msg = f"Table {table_name!r} does not exist"
            raise LookupError(msg)
        return table

    def render(
        self,
        table: Table,
        kind: StatementKind,
        values: Mapping[str, str] | None = None,
    ) -> str | None:
        """Render one statement kind for a table.

        Returns None only for an INSERT without any matching column value.
        """
        if kind == "create":
            return render_create(table)
        if kind == "drop":
            return render_drop(table)
        if kind == "select":
            return render_select_all(table)
        if kind == "insert":
            return render_insert(table, values or {})
        msg = f"Unknown statement kind: {kind!r}"
        raise ValueError(msg)

    # ---- execution ---------------------------------------------------------
    def create(self, table: Table) -> None:
        """Run CREATE TABLE for a reflected table."""
        self.executor.execute_no_result(render_create(table))

    def drop(self, table: Table) -> None:
        """Run DROP TABLE for a reflected table."""
        self.executor.execute_no_result(render_drop(table))

    def insert(self, table: Table, values: Mapping[str, str]) -> bool:
        """Run INSERT for the given values.

        Returns:
            False when no value matched a column and nothing was run
        """
        statement = render_insert(table, values)
        if statement is None:
            _logger.info("Nothing to insert into %s", table.name)
            return False
        self.executor.execute_no_result(statement)
        return True

    def select_all(self, table: Table) -> list[tuple[Any, ...]]:
        """Run SELECT * for a table and return the rows as tuples."""

        def _as_tuple(row: RawRow) -> tuple[Any, ...]:
            return tuple(row)

        return self.executor.execute_rows(render_select_all(table), _as_tuple)

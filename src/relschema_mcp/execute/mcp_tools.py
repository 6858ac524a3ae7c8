"""MCP tool registration for table reflection and statement synthesis.

Provides `describe_table` and `render_table_statement`. Statements are only
rendered here; the MCP surface never executes DDL or DML.
"""

from __future__ import annotations

from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from fastmcp.utilities.logging import get_logger
from pydantic import Field

from relschema_mcp.builders import StatementResultBuilder, TableDescriptionBuilder
from relschema_mcp.models import StatementResult, TableDescription
from relschema_mcp.reflection.exceptions import RelSchemaError
from relschema_mcp.services.schema_service_manager import SchemaServiceManager

_logger = get_logger(__name__)


def register_schema_tools(mcp: FastMCP, manager: SchemaServiceManager | None = None) -> None:
    """Register reflection and statement tools on a FastMCP instance."""

    mgr = manager or SchemaServiceManager.get_instance()

    @mcp.tool
    async def describe_table(  # pyright: ignore[reportUnusedFunction]
        ctx: Context,
        table_name: Annotated[str, Field(description="Name of an existing table")],
    ) -> TableDescription:
        """Reflect a table and describe its columns, types, constraints and primary key.

        Columns whose type is not supported are listed under skipped_columns.
        """
        _logger.info("describe_table: %s", table_name)
        try:
            table = mgr.get_schema_service().require_table(table_name)
        except (LookupError, ValueError, RelSchemaError) as exc:
            await ctx.error(f"Cannot describe {table_name}: {exc}")
            raise
        return TableDescriptionBuilder.build(table)

    @mcp.tool
    async def render_table_statement(  # pyright: ignore[reportUnusedFunction]
        ctx: Context,
        table_name: Annotated[str, Field(description="Name of an existing table")],
        kind: Annotated[
            Literal["create", "drop", "select", "insert"],
            Field(description="Statement to render for the reflected table"),
        ],
        values: Annotated[
            dict[str, str] | None,
            Field(
                description=(
                    "For insert only: column name to SQL literal. Values are used verbatim, "
                    "so string literals must already be quoted, e.g. {\"name\": \"'Doe'\"}."
                )
            ),
        ] = None,
    ) -> StatementResult:
        """Render CREATE TABLE, DROP TABLE, SELECT * or INSERT for a reflected table.

        The statement is returned, not executed.
        """
        _logger.info("render_table_statement: %s %s", kind, table_name)
        try:
            service = mgr.get_schema_service()
            table = service.require_table(table_name)
        except (LookupError, ValueError, RelSchemaError) as exc:
            await ctx.error(f"Cannot reflect {table_name}: {exc}")
            raise
        sql = service.render(table, kind, values)
        return StatementResultBuilder.build(table, kind, sql)

    _ = (describe_table, render_table_statement)

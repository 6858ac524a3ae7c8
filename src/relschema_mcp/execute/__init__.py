"""Execution package: the query executor contract and its SQLAlchemy backend.

MCP tool registration lives in ``relschema_mcp.execute.mcp_tools`` and is
imported by the server directly.
"""

from __future__ import annotations

from .runner import QueryExecutor, SqlAlchemyExecutor, is_missing_table_error

__all__ = [
    "QueryExecutor",
    "SqlAlchemyExecutor",
    "is_missing_table_error",
]

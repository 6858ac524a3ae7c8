"""Configuration service for relschema-mcp.

This module centralizes environment variable handling and database engine
creation for the application.
"""

from __future__ import annotations

import os

import sqlalchemy as sa

from relschema_mcp.reflection.constants import UnknownTypePolicy

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class ConfigService:
    """Service for managing configuration and database connections."""

    @staticmethod
    def get_database_url() -> str:
        """Get database URL from environment variable.

        Returns:
            Database URL string

        Raises:
            ValueError: If RELSCHEMA_MCP_DATABASE_URL environment variable is not set
        """
        database_url = os.getenv("RELSCHEMA_MCP_DATABASE_URL")
        if not database_url:
            error_msg = "RELSCHEMA_MCP_DATABASE_URL environment variable not set"
            raise ValueError(error_msg)
        return database_url

    @staticmethod
    def create_database_engine(url: str) -> sa.Engine:
        """Create SQLAlchemy database engine.

        Args:
            url: Database connection URL

        Returns:
            SQLAlchemy Engine instance
        """
        return sa.create_engine(url, pool_pre_ping=True)

    @staticmethod
    def unknown_type_policy() -> UnknownTypePolicy:
        """Policy for columns whose type is not recognized (drop or raise).

        Raises:
            ValueError: If RELSCHEMA_MCP_UNKNOWN_TYPES names no known policy
        """
        val = os.getenv("RELSCHEMA_MCP_UNKNOWN_TYPES") or UnknownTypePolicy.DROP.value
        try:
            return UnknownTypePolicy(val.strip().lower())
        except ValueError as exc:
            choices = ", ".join(p.value for p in UnknownTypePolicy)
            error_msg = f"RELSCHEMA_MCP_UNKNOWN_TYPES must be one of {choices}, got {val!r}"
            raise ValueError(error_msg) from exc

    @staticmethod
    def strict_foreign_keys() -> bool:
        """Whether MUL columns without a FOREIGN KEY clause fail reflection.

        Raises:
            ValueError: If RELSCHEMA_MCP_STRICT_FOREIGN_KEYS is not a boolean
        """
        val = os.getenv("RELSCHEMA_MCP_STRICT_FOREIGN_KEYS") or "true"
        flag = val.strip().lower()
        if flag in _TRUE_VALUES:
            return True
        if flag in _FALSE_VALUES:
            return False
        error_msg = f"RELSCHEMA_MCP_STRICT_FOREIGN_KEYS must be a boolean, got {val!r}"
        raise ValueError(error_msg)

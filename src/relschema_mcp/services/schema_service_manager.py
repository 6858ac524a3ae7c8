"""Schema service manager for relschema-mcp.

Provides a process-wide `SchemaService` built lazily from configuration on
first use, so the MCP server can start before the database is reachable.
"""

from __future__ import annotations

import threading
from typing import ClassVar

from fastmcp.utilities.logging import get_logger
import sqlalchemy as sa

from relschema_mcp.execute.runner import SqlAlchemyExecutor
from relschema_mcp.services.config_service import ConfigService
from relschema_mcp.services.schema_service import SchemaService


class SchemaServiceManager:
    """Singleton manager for the SchemaService instance."""

    _instance: ClassVar[SchemaServiceManager | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._schema_service: SchemaService | None = None
        self._engine: sa.Engine | None = None
        self._service_lock = threading.Lock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> SchemaServiceManager:
        """Get the singleton instance of SchemaServiceManager."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.shutdown()
            cls._instance = None

    def get_schema_service(self) -> SchemaService:
        """Return the SchemaService, building it from configuration on first use.

        Raises:
            ValueError: If the database URL is not configured
        """
        with self._service_lock:
            if self._schema_service is None:
                url = ConfigService.get_database_url()
                self._engine = ConfigService.create_database_engine(url)
                self._logger.info(
                    "Creating SchemaService for dialect %s", self._engine.dialect.name
                )
                self._schema_service = SchemaService(
                    SqlAlchemyExecutor(self._engine),
                    unknown_types=ConfigService.unknown_type_policy(),
                    strict_foreign_keys=ConfigService.strict_foreign_keys(),
                )
            return self._schema_service

    def shutdown(self) -> None:
        """Dispose of the engine, if one was created."""
        with self._service_lock:
            if self._engine is not None:
                self._logger.info("Disposing database engine")
                self._engine.dispose()
            self._engine = None
            self._schema_service = None

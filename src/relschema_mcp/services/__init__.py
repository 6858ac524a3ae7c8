"""Services package for relschema-mcp.

Main Components:
- ConfigService: Configuration and database connection management
- SchemaService: Reflection and statement orchestration
- SchemaServiceManager: Process-wide SchemaService access
"""

from .config_service import ConfigService
from .schema_service import SchemaService
from .schema_service_manager import SchemaServiceManager

__all__ = [
    "ConfigService",
    "SchemaService",
    "SchemaServiceManager",
]

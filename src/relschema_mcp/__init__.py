"""relschema-mcp: MySQL schema reflection and statement synthesis.

Reflects live tables into an immutable typed model (Table, Attribute,
AttributeType, Constraint) and renders CREATE TABLE, DROP TABLE, SELECT *
and INSERT statements from it. A FastMCP server exposes both.
"""

from relschema_mcp.reflection import (
    Attribute,
    AttributeType,
    Constraint,
    ConstraintKind,
    Table,
    TypeKind,
    parse_type,
    reflect_table,
    render_type,
)
from relschema_mcp.services import ConfigService, SchemaService
from relschema_mcp.statements import (
    render_create,
    render_drop,
    render_insert,
    render_select_all,
)

__all__ = [  # noqa: RUF022
    # Schema model
    "Attribute",
    "AttributeType",
    "Constraint",
    "ConstraintKind",
    "Table",
    "TypeKind",
    # Reflection
    "parse_type",
    "reflect_table",
    "render_type",
    # Statements
    "render_create",
    "render_drop",
    "render_insert",
    "render_select_all",
    # Services
    "ConfigService",
    "SchemaService",
]

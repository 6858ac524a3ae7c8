"""Schema reflection package.

Turns MySQL catalog rows into a typed, immutable schema model.

Main Components:
- parse_type / render_type: Column type declarations
- Constraint / derive_constraints: Column constraints
- Attribute / Table: Reflected schema model
- AttributeBuilder / TableBuilder / reflect_table: Reflection from the catalog
"""

from __future__ import annotations

from .builder import (
    AttributeBuilder,
    ColumnRow,
    ForeignKeyResolver,
    TableBuilder,
    reflect_table,
)
from .constants import UnknownTypePolicy
from .constraints import (
    AUTO_INCREMENT,
    NOT_NULL,
    UNIQUE,
    Constraint,
    ConstraintKind,
    derive_constraints,
)
from .exceptions import (
    ExecutionError,
    ForeignKeyResolutionError,
    RelSchemaError,
    TableNotFoundError,
    TypeDeclarationError,
    UnknownColumnTypeError,
)
from .schema import Attribute, Table
from .types import AttributeType, TypeKind, parse_type, render_type

__all__ = [
    "AUTO_INCREMENT",
    "NOT_NULL",
    "UNIQUE",
    "Attribute",
    "AttributeBuilder",
    "AttributeType",
    "ColumnRow",
    "Constraint",
    "ConstraintKind",
    "ExecutionError",
    "ForeignKeyResolutionError",
    "ForeignKeyResolver",
    "RelSchemaError",
    "Table",
    "TableBuilder",
    "TableNotFoundError",
    "TypeDeclarationError",
    "TypeKind",
    "UnknownColumnTypeError",
    "UnknownTypePolicy",
    "derive_constraints",
    "parse_type",
    "reflect_table",
    "render_type",
]

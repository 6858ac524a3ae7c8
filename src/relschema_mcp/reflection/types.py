"""Column type model and type declaration parser.

This module turns a raw MySQL column type declaration, as reported by
``SHOW FULL COLUMNS`` (``"varchar(255)"``, ``"int(11) unsigned"``,
``"enum('a','b')"``), into one member of the closed :class:`AttributeType`
model, and renders the model back into its declaration form.

Parsing walks an ordered rule table top to bottom. Rules are ordered by
specificity and every keyword is anchored at offset 0 and must not be
followed by another identifier character, so ``BOOL`` never shadows
``BOOLEAN`` and ``DATE`` never shadows ``DATETIME``.

Functions:
- parse_type(): Parse a raw declaration, ``None`` when unrecognized
- render_type(): Render the lower-case declaration form
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Final

from .exceptions import TypeDeclarationError

U8_MAX: Final[int] = 0xFF
U16_MAX: Final[int] = 0xFFFF
# Fractional seconds precision of DATETIME, TIMESTAMP and TIME
FSP_MAX: Final[int] = 6


class TypeKind(Enum):
    """Every MySQL column type the model can represent."""

    # string data types
    CHAR = "char"
    VARCHAR = "varchar"
    BINARY = "binary"
    VARBINARY = "varbinary"
    TINYBLOB = "tinyblob"
    TINYTEXT = "tinytext"
    TEXT = "text"
    BLOB = "blob"
    MEDIUMTEXT = "mediumtext"
    MEDIUMBLOB = "mediumblob"
    LONGTEXT = "longtext"
    LONGBLOB = "longblob"
    ENUM = "enum"
    SET = "set"

    # numeric data types
    BIT = "bit"
    TINYINT = "tinyint"
    BOOL = "bool"
    BOOLEAN = "boolean"
    SMALLINT = "smallint"
    MEDIUMINT = "mediumint"
    INT = "int"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"

    # date and time
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    YEAR = "year"


class _Shape(Enum):
    BARE = "bare"
    SIZED = "sized"
    OPTIONAL_SIZE = "optional_size"
    PRECISION_SCALE = "precision_scale"
    VALUES = "values"


_SHAPES: Final[dict[TypeKind, _Shape]] = {
    TypeKind.CHAR: _Shape.SIZED,
    TypeKind.VARCHAR: _Shape.SIZED,
    TypeKind.BINARY: _Shape.SIZED,
    TypeKind.VARBINARY: _Shape.SIZED,
    TypeKind.BLOB: _Shape.OPTIONAL_SIZE,
    TypeKind.ENUM: _Shape.VALUES,
    TypeKind.SET: _Shape.VALUES,
    TypeKind.BIT: _Shape.SIZED,
    TypeKind.TINYINT: _Shape.OPTIONAL_SIZE,
    TypeKind.SMALLINT: _Shape.OPTIONAL_SIZE,
    TypeKind.MEDIUMINT: _Shape.OPTIONAL_SIZE,
    TypeKind.INT: _Shape.OPTIONAL_SIZE,
    TypeKind.BIGINT: _Shape.OPTIONAL_SIZE,
    TypeKind.FLOAT: _Shape.OPTIONAL_SIZE,
    TypeKind.DECIMAL: _Shape.PRECISION_SCALE,
    TypeKind.DATETIME: _Shape.OPTIONAL_SIZE,
    TypeKind.TIMESTAMP: _Shape.OPTIONAL_SIZE,
    TypeKind.TIME: _Shape.OPTIONAL_SIZE,
}

# Largest size each sized kind accepts
_SIZE_LIMITS: Final[dict[TypeKind, int]] = {
    TypeKind.CHAR: U8_MAX,
    TypeKind.VARCHAR: U16_MAX,
    TypeKind.BINARY: U8_MAX,
    TypeKind.VARBINARY: U16_MAX,
    TypeKind.BLOB: U16_MAX,
    TypeKind.BIT: U8_MAX,
    TypeKind.TINYINT: U8_MAX,
    TypeKind.SMALLINT: U8_MAX,
    TypeKind.MEDIUMINT: U8_MAX,
    TypeKind.INT: U8_MAX,
    TypeKind.BIGINT: U8_MAX,
    TypeKind.FLOAT: U8_MAX,
    TypeKind.DECIMAL: U8_MAX,
    TypeKind.DATETIME: FSP_MAX,
    TypeKind.TIMESTAMP: FSP_MAX,
    TypeKind.TIME: FSP_MAX,
}


@dataclass(frozen=True)
class AttributeType:
    """A parsed column type.

    Attributes:
        kind: Type discriminant
        size: Length, display width, precision or fractional seconds, when the kind declares one
        scale: Decimal scale, only for DECIMAL
        values: Permitted values, only for ENUM and SET
    """

    kind: TypeKind
    size: int | None = None
    scale: int | None = None
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        shape = _SHAPES.get(self.kind, _Shape.BARE)
        if shape is _Shape.SIZED and self.size is None:
            msg = f"{self.kind.name} requires a size"
            raise ValueError(msg)
        if shape is _Shape.PRECISION_SCALE and (self.size is None or self.scale is None):
            msg = f"{self.kind.name} requires precision and scale"
            raise ValueError(msg)
        if shape is _Shape.VALUES and not self.values:
            msg = f"{self.kind.name} requires at least one value"
            raise ValueError(msg)
        if shape is _Shape.BARE and (self.size is not None or self.scale is not None):
            msg = f"{self.kind.name} takes no size"
            raise ValueError(msg)

    def __str__(self) -> str:
        return render_type(self)


@dataclass(frozen=True)
class _TypeRule:
    pattern: re.Pattern[str]
    kind: TypeKind


def _rule(regex: str, kind: TypeKind) -> _TypeRule:
    # A keyword must not run on into a longer identifier
    return _TypeRule(re.compile(regex + r"(?![A-Z0-9_(])", re.IGNORECASE), kind)


# Ordered most specific first; first match wins
_RULES: Final[tuple[_TypeRule, ...]] = (
    _rule(r"VARCHAR\((\d+)\)", TypeKind.VARCHAR),
    _rule(r"CHAR\((\d+)\)", TypeKind.CHAR),
    _rule(r"VARBINARY\((\d+)\)", TypeKind.VARBINARY),
    _rule(r"BINARY\((\d+)\)", TypeKind.BINARY),
    _rule(r"TINYBLOB", TypeKind.TINYBLOB),
    _rule(r"TINYTEXT", TypeKind.TINYTEXT),
    _rule(r"MEDIUMBLOB", TypeKind.MEDIUMBLOB),
    _rule(r"MEDIUMTEXT", TypeKind.MEDIUMTEXT),
    _rule(r"LONGBLOB", TypeKind.LONGBLOB),
    _rule(r"LONGTEXT", TypeKind.LONGTEXT),
    _rule(r"BLOB(?:\((\d+)\))?", TypeKind.BLOB),
    _rule(r"TEXT", TypeKind.TEXT),
    _rule(r"ENUM\(('.*')\)", TypeKind.ENUM),
    _rule(r"SET\(('.*')\)", TypeKind.SET),
    _rule(r"BIT\((\d+)\)", TypeKind.BIT),
    _rule(r"TINYINT(?:\((\d+)\))?", TypeKind.TINYINT),
    _rule(r"BOOLEAN", TypeKind.BOOLEAN),
    _rule(r"BOOL", TypeKind.BOOL),
    _rule(r"SMALLINT(?:\((\d+)\))?", TypeKind.SMALLINT),
    _rule(r"MEDIUMINT(?:\((\d+)\))?", TypeKind.MEDIUMINT),
    _rule(r"BIGINT(?:\((\d+)\))?", TypeKind.BIGINT),
    _rule(r"INTEGER(?:\((\d+)\))?", TypeKind.INT),
    _rule(r"INT(?:\((\d+)\))?", TypeKind.INT),
    _rule(r"FLOAT(?:\((\d+)\))?", TypeKind.FLOAT),
    _rule(r"DECIMAL\((\d+),\s*(\d+)\)", TypeKind.DECIMAL),
    _rule(r"DATETIME(?:\((\d+)\))?", TypeKind.DATETIME),
    _rule(r"DATE", TypeKind.DATE),
    _rule(r"TIMESTAMP(?:\((\d+)\))?", TypeKind.TIMESTAMP),
    _rule(r"TIME(?:\((\d+)\))?", TypeKind.TIME),
    _rule(r"YEAR", TypeKind.YEAR),
)

_QUOTED_VALUE: Final[re.Pattern[str]] = re.compile(r"'((?:[^']|'')*)'")


def _checked_size(raw: str, kind: TypeKind, digits: str) -> int:
    value = int(digits)
    limit = _SIZE_LIMITS[kind]
    if value > limit:
        raise TypeDeclarationError(raw, f"{kind.name} size {value} exceeds {limit}")
    return value


def _split_values(raw: str, body: str) -> tuple[str, ...]:
    values = tuple(v.replace("''", "'") for v in _QUOTED_VALUE.findall(body))
    if not values:
        raise TypeDeclarationError(raw, "empty value list")
    return values


def parse_type(raw: str) -> AttributeType | None:
    """Parse a raw column type declaration.

    Args:
        raw: Type string as reported by the catalog, in any letter case

    Returns:
        The matching AttributeType, or None when no rule matches

    Raises:
        TypeDeclarationError: If a rule matches but a size is out of range
    """
    text = raw.strip()
    for rule in _RULES:
        match = rule.pattern.match(text)
        if match is None:
            continue

        kind = rule.kind
        shape = _SHAPES.get(kind, _Shape.BARE)
        if shape is _Shape.VALUES:
            return AttributeType(kind, values=_split_values(raw, match.group(1)))
        if shape is _Shape.PRECISION_SCALE:
            return AttributeType(
                kind,
                size=_checked_size(raw, kind, match.group(1)),
                scale=_checked_size(raw, kind, match.group(2)),
            )
        if shape in (_Shape.SIZED, _Shape.OPTIONAL_SIZE):
            digits = match.group(1)
            size = _checked_size(raw, kind, digits) if digits is not None else None
            return AttributeType(kind, size=size)
        return AttributeType(kind)
    return None


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def render_type(data_type: AttributeType) -> str:
    """Render the lower-case declaration of a type, e.g. ``varchar(255)``."""
    name = data_type.kind.value
    if data_type.values:
        return f"{name}({','.join(_quote(v) for v in data_type.values)})"
    if data_type.scale is not None:
        return f"{name}({data_type.size},{data_type.scale})"
    if data_type.size is not None:
        return f"{name}({data_type.size})"
    return name

"""Table reflection builders.

This module turns ``SHOW FULL COLUMNS`` rows into Attribute and Table
values. Foreign key targets are looked up through an injected
``ForeignKeyResolver`` rather than a global database handle, so the
builders run against any QueryExecutor, including in-memory fakes.

Classes:
- ColumnRow: The fields of one column listing row the builders use
- ForeignKeyResolver: Resolves MUL keys from ``SHOW CREATE TABLE`` text
- AttributeBuilder: Builds one Attribute per column row
- TableBuilder: Builds one Table from all of its column rows

Functions:
- reflect_table(): Run the catalog query for a table and build it
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastmcp.utilities.logging import get_logger

from .constants import Constants, UnknownTypePolicy
from .constraints import Constraint, derive_constraints
from .exceptions import ForeignKeyResolutionError, TableNotFoundError, UnknownColumnTypeError
from .schema import Attribute, Table
from .types import parse_type

if TYPE_CHECKING:
    from relschema_mcp.execute.runner import QueryExecutor

_logger = get_logger(__name__)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes | bytearray):
        return value.decode("utf-8")
    return str(value)


@dataclass(frozen=True)
class ColumnRow:
    """One row of ``SHOW FULL COLUMNS`` reduced to the fields in use.

    Attributes:
        name: Column name (field 0)
        raw_type: Declared type (field 1)
        nullable: ``"YES"`` or ``"NO"`` (field 3)
        key: Key classification (field 4)
        extra: Extra information such as ``auto_increment`` (field 6)
    """

    name: str
    raw_type: str
    nullable: str = "YES"
    key: str = ""
    extra: str = ""

    @classmethod
    def from_raw(cls, row: Sequence[Any]) -> ColumnRow:
        """Pick the used fields out of a positional catalog row."""
        return cls(
            name=_text(row[Constants.FIELD_NAME]),
            raw_type=_text(row[Constants.FIELD_TYPE]),
            nullable=_text(row[Constants.FIELD_NULLABLE]),
            key=_text(row[Constants.FIELD_KEY]),
            extra=_text(row[Constants.FIELD_EXTRA]),
        )

    @property
    def is_primary(self) -> bool:
        return self.key == Constants.KEY_PRIMARY


class ForeignKeyResolver:
    """Resolve foreign key targets from a table's definition text.

    The definition of each table is fetched at most once and reused for
    every MUL column of that table.

    Attributes:
        executor: QueryExecutor used for ``SHOW CREATE TABLE``
        strict: When True a MUL column without a FOREIGN KEY clause raises
            ForeignKeyResolutionError; when False it resolves to no target
            (MySQL also reports MUL for plain non-unique indexes)
    """

    def __init__(self, executor: QueryExecutor, *, strict: bool = True) -> None:
        self.executor = executor
        self.strict = strict
        self._definitions: dict[str, str] = {}

    def definition(self, table_name: str) -> str:
        """Return the ``SHOW CREATE TABLE`` text of a table."""
        cached = self._definitions.get(table_name)
        if cached is not None:
            return cached
        statement = Constants.SHOW_CREATE_TEMPLATE.format(table=table_name)
        rows = self.executor.execute_rows(
            statement, lambda row: _text(row[Constants.FIELD_DEFINITION])
        )
        text = "\n".join(rows)
        self._definitions[table_name] = text
        return text

    def resolve(self, table_name: str, column_name: str) -> list[Constraint]:
        """Return the foreign keys declared on ``column_name``.

        Raises:
            ForeignKeyResolutionError: In strict mode, when no clause matches
        """
        pattern = Constants.foreign_key_pattern(column_name)
        found = [
            Constraint.foreign_key(match.group(1), match.group(2))
            for match in pattern.finditer(self.definition(table_name))
        ]
        if not found:
            if self.strict:
                raise ForeignKeyResolutionError(table_name, column_name)
            _logger.info(
                "Column %s.%s is indexed but has no foreign key", table_name, column_name
            )
        return found


class AttributeBuilder:
    """Build Attribute values from column rows."""

    def __init__(
        self,
        resolver: ForeignKeyResolver | None = None,
        *,
        unknown_types: UnknownTypePolicy = UnknownTypePolicy.DROP,
    ) -> None:
        self.resolver = resolver
        self.unknown_types = unknown_types

    def build(self, row: ColumnRow, table_name: str) -> Attribute | None:
        """Build the Attribute for one column.

        Args:
            row: Column listing row
            table_name: Table the column belongs to

        Returns:
            The Attribute, or None when the column type is not recognized
            and the policy is DROP

        Raises:
            UnknownColumnTypeError: If the type is not recognized under RAISE
            TypeDeclarationError: If the type carries an out-of-range size
            ForeignKeyResolutionError: If a MUL key cannot be confirmed
        """
        _logger.debug("name:%s data_type:%s", row.name, row.raw_type)

        data_type = parse_type(row.raw_type)
        if data_type is None:
            if self.unknown_types is UnknownTypePolicy.RAISE:
                raise UnknownColumnTypeError(table_name, row.name, row.raw_type)
            _logger.warning(
                "Dropping column %s.%s with unrecognized type %r",
                table_name,
                row.name,
                row.raw_type,
            )
            return None

        foreign_keys: list[Constraint] = []
        if row.key == Constants.KEY_MULTIPLE:
            if self.resolver is None:
                msg = f"Column {table_name}.{row.name} needs a ForeignKeyResolver"
                raise ValueError(msg)
            foreign_keys = self.resolver.resolve(table_name, row.name)

        return Attribute(
            name=row.name,
            data_type=data_type,
            constraints=derive_constraints(row.nullable, row.key, row.extra, foreign_keys),
        )


class TableBuilder:
    """Build a Table from its column rows."""

    def __init__(self, attribute_builder: AttributeBuilder) -> None:
        self.attribute_builder = attribute_builder

    def build(self, table_name: str, rows: Iterable[tuple[ColumnRow, bool]]) -> Table:
        """Build a Table, dropping columns whose type is not recognized.

        Args:
            table_name: Name of the table
            rows: Column rows paired with their primary key flag

        Returns:
            The Table. The primary key index refers to the surviving
            attributes; a dropped primary key column leaves no primary key.
            Of a composite key only the first column is kept.
        """
        attributes: list[Attribute] = []
        skipped: list[str] = []
        key_columns: list[str] = []
        primary_key: int | None = None

        for row, is_primary in rows:
            attr = self.attribute_builder.build(row, table_name)
            if is_primary:
                key_columns.append(row.name)
            if attr is None:
                skipped.append(row.name)
                continue
            if is_primary and len(key_columns) == 1:
                primary_key = len(attributes)
            attributes.append(attr)

        if len(key_columns) > 1:
            _logger.warning(
                "Table %s has a composite primary key %s; keeping only %s",
                table_name,
                key_columns,
                key_columns[0],
            )

        return Table(
            name=table_name,
            attributes=tuple(attributes),
            primary_key=primary_key,
            skipped_columns=tuple(skipped),
        )


def reflect_table(
    table_name: str,
    executor: QueryExecutor,
    *,
    unknown_types: UnknownTypePolicy = UnknownTypePolicy.DROP,
    strict_foreign_keys: bool = True,
) -> Table | None:
    """Reflect one table from the live database.

    Issues ``SHOW FULL COLUMNS`` and, when the table has MUL keys, one
    ``SHOW CREATE TABLE``.

    Args:
        table_name: Name of an existing table
        executor: QueryExecutor for the catalog statements
        unknown_types: Policy for columns with unrecognized types
        strict_foreign_keys: Fail on MUL columns without a FOREIGN KEY clause

    Returns:
        The reflected Table, or None if the table does not exist

    Raises:
        ExecutionError: If a catalog statement fails
        ForeignKeyResolutionError: If a MUL key cannot be confirmed
    """
    _logger.info("Reflecting table: %s", table_name)
    statement = Constants.SHOW_COLUMNS_TEMPLATE.format(table=table_name)
    try:
        rows = executor.execute_rows(statement, ColumnRow.from_raw)
    except TableNotFoundError:
        _logger.info("Table %s does not exist", table_name)
        return None

    for row in rows:
        _logger.debug("load row: %s", row)

    resolver = ForeignKeyResolver(executor, strict=strict_foreign_keys)
    builder = TableBuilder(AttributeBuilder(resolver, unknown_types=unknown_types))
    table = builder.build(table_name, ((row, row.is_primary) for row in rows))

    _logger.info(
        "Reflected %s: %d columns, %d skipped",
        table_name,
        len(table.attributes),
        len(table.skipped_columns),
    )
    return table

"""Reflected schema model.

Models:
- Attribute: One reflected column with its parsed type and constraints
- Table: One reflected table, an immutable value used for statement synthesis

A Table is a snapshot. It does not track the live database and goes stale
when the underlying table changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constraints import Constraint, ordered_foreign_keys
from .types import AttributeType, render_type


@dataclass(frozen=True)
class Attribute:
    """A column of a reflected table.

    Attributes:
        name: Column name as defined in the database
        data_type: Parsed column type
        constraints: Constraints attached to the column
    """

    name: str
    data_type: AttributeType
    constraints: frozenset[Constraint] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of constraints, store a frozenset
        if not isinstance(self.constraints, frozenset):
            object.__setattr__(self, "constraints", frozenset(self.constraints))

    def foreign_keys(self) -> list[Constraint]:
        return ordered_foreign_keys(self.constraints)

    def schema_fmt(self) -> str:
        """Return ``"<name> <type>"`` without constraints."""
        return f"{self.name} {render_type(self.data_type)}"


@dataclass(frozen=True)
class Table:
    """A reflected table.

    Attributes:
        name: Table name
        attributes: Columns in declaration order
        primary_key: Index of the primary key column in ``attributes``
        skipped_columns: Columns dropped during reflection because their
            type was not recognized; not part of any rendered statement
    """

    name: str
    attributes: tuple[Attribute, ...] = ()
    primary_key: int | None = None
    skipped_columns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))
        if not isinstance(self.skipped_columns, tuple):
            object.__setattr__(self, "skipped_columns", tuple(self.skipped_columns))
        if self.primary_key is not None and not 0 <= self.primary_key < len(self.attributes):
            msg = (
                f"primary_key index {self.primary_key} out of range for "
                f"{len(self.attributes)} attributes of table {self.name!r}"
            )
            raise ValueError(msg)

    @property
    def primary_key_attribute(self) -> Attribute | None:
        if self.primary_key is None:
            return None
        return self.attributes[self.primary_key]

    def foreign_keys(self) -> list[tuple[str, str]]:
        """Return the ``(table, attribute)`` targets referenced by this table.

        Targets are references by name; resolving them to Table objects is
        left to the caller.
        """
        return [
            (fk.referenced_table or "", fk.referenced_attribute or "")
            for attr in self.attributes
            for fk in attr.foreign_keys()
        ]

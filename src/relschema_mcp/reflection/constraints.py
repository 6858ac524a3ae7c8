"""Column constraint model.

Constraints are derived from the three flags ``SHOW FULL COLUMNS`` reports
per column (nullability, key classification and extra). Foreign key targets
are resolved separately and passed in, since the column listing only says
that a foreign key exists.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .constants import Constants


class ConstraintKind(Enum):
    """Discriminant of a column constraint."""

    NOT_NULL = "not_null"
    UNIQUE = "unique"
    AUTO_INCREMENT = "auto_increment"
    FOREIGN_KEY = "foreign_key"


# Fixed rendering order of the inline constraint words
_WORD_ORDER: Final[tuple[ConstraintKind, ...]] = (
    ConstraintKind.UNIQUE,
    ConstraintKind.NOT_NULL,
    ConstraintKind.AUTO_INCREMENT,
)

_WORDS: Final[dict[ConstraintKind, str]] = {
    ConstraintKind.NOT_NULL: "Not Null",
    ConstraintKind.UNIQUE: "Unique",
    ConstraintKind.AUTO_INCREMENT: "Auto_increment",
}


@dataclass(frozen=True)
class Constraint:
    """A rule attached to a column.

    Equality is structural: two foreign keys with different targets are
    different constraints, so a column may reference more than one table.

    Attributes:
        kind: Constraint discriminant
        referenced_table: Target table, only for FOREIGN_KEY
        referenced_attribute: Target column, only for FOREIGN_KEY
    """

    kind: ConstraintKind
    referenced_table: str | None = None
    referenced_attribute: str | None = None

    def __post_init__(self) -> None:
        has_target = self.referenced_table is not None or self.referenced_attribute is not None
        if self.kind is ConstraintKind.FOREIGN_KEY:
            if self.referenced_table is None or self.referenced_attribute is None:
                msg = "FOREIGN_KEY requires a referenced table and attribute"
                raise ValueError(msg)
        elif has_target:
            msg = f"{self.kind.name} takes no reference target"
            raise ValueError(msg)

    @classmethod
    def foreign_key(cls, table_name: str, attribute_name: str) -> Constraint:
        return cls(ConstraintKind.FOREIGN_KEY, table_name, attribute_name)

    @property
    def is_foreign_key(self) -> bool:
        return self.kind is ConstraintKind.FOREIGN_KEY

    def __str__(self) -> str:
        if self.is_foreign_key:
            return f"{self.referenced_table}({self.referenced_attribute})"
        return _WORDS[self.kind]


NOT_NULL: Final[Constraint] = Constraint(ConstraintKind.NOT_NULL)
UNIQUE: Final[Constraint] = Constraint(ConstraintKind.UNIQUE)
AUTO_INCREMENT: Final[Constraint] = Constraint(ConstraintKind.AUTO_INCREMENT)


def derive_constraints(
    nullable: str,
    key: str,
    extra: str,
    foreign_keys: Iterable[Constraint] = (),
) -> frozenset[Constraint]:
    """Derive the constraint set of a column from its catalog flags.

    Args:
        nullable: ``"YES"`` or ``"NO"``
        key: Key classification (``""``, ``"PRI"``, ``"UNI"``, ``"MUL"``)
        extra: Extra column information such as ``"auto_increment"``
        foreign_keys: Resolved foreign keys, applied only for ``"MUL"``

    Returns:
        Frozen set of constraints for the column
    """
    found: set[Constraint] = set()
    if nullable == Constants.NOT_NULLABLE:
        found.add(NOT_NULL)
    if Constants.EXTRA_AUTO_INCREMENT in (extra or "").lower():
        found.add(AUTO_INCREMENT)
    if key == Constants.KEY_UNIQUE:
        found.add(UNIQUE)
    elif key == Constants.KEY_MULTIPLE:
        found.update(fk for fk in foreign_keys if fk.is_foreign_key)
    return frozenset(found)


def ordered_constraint_words(constraints: Iterable[Constraint]) -> list[str]:
    """Return the inline constraint words in a fixed order.

    Foreign keys are not inline words and are left out.
    """
    kinds = {c.kind for c in constraints}
    return [_WORDS[kind] for kind in _WORD_ORDER if kind in kinds]


def ordered_foreign_keys(constraints: Iterable[Constraint]) -> list[Constraint]:
    """Return the foreign key constraints sorted by target."""
    return sorted(
        (c for c in constraints if c.is_foreign_key),
        key=lambda c: (c.referenced_table or "", c.referenced_attribute or ""),
    )

from __future__ import annotations

import pytest

from relschema_mcp.reflection.constraints import (
    AUTO_INCREMENT,
    NOT_NULL,
    UNIQUE,
    Constraint,
    ConstraintKind,
    derive_constraints,
    ordered_constraint_words,
    ordered_foreign_keys,
)


def test_not_null_from_nullability_flag() -> None:
    assert derive_constraints("NO", "", "") == {NOT_NULL}
    assert derive_constraints("YES", "", "") == frozenset()


def test_auto_increment_from_extra() -> None:
    assert derive_constraints("NO", "PRI", "auto_increment") == {NOT_NULL, AUTO_INCREMENT}
    assert AUTO_INCREMENT in derive_constraints("NO", "", "AUTO_INCREMENT")


def test_unique_key() -> None:
    assert derive_constraints("YES", "UNI", "") == {UNIQUE}


def test_mul_key_applies_resolved_foreign_keys() -> None:
    fk = Constraint.foreign_key("customers", "id")
    assert derive_constraints("NO", "MUL", "", [fk]) == {NOT_NULL, fk}


def test_foreign_keys_ignored_without_mul_key() -> None:
    fk = Constraint.foreign_key("customers", "id")
    assert derive_constraints("YES", "UNI", "", [fk]) == {UNIQUE}


@pytest.mark.parametrize("key", ["PRI", "", "XYZ"])
def test_other_key_flags_add_nothing(key: str) -> None:
    assert derive_constraints("YES", key, "") == frozenset()


def test_foreign_keys_compare_structurally() -> None:
    a = Constraint.foreign_key("t1", "id")
    b = Constraint.foreign_key("t2", "id")
    assert a != b
    assert a == Constraint.foreign_key("t1", "id")
    assert len({a, b}) == 2
    assert NOT_NULL == Constraint(ConstraintKind.NOT_NULL)


def test_constraint_payload_validation() -> None:
    with pytest.raises(ValueError, match="requires a referenced"):
        Constraint(ConstraintKind.FOREIGN_KEY, "t1")
    with pytest.raises(ValueError, match="takes no reference"):
        Constraint(ConstraintKind.UNIQUE, "t1", "id")


def test_words_follow_fixed_order() -> None:
    constraints = {AUTO_INCREMENT, NOT_NULL, UNIQUE, Constraint.foreign_key("t", "id")}
    assert ordered_constraint_words(constraints) == ["Unique", "Not Null", "Auto_increment"]
    assert ordered_constraint_words(set()) == []


def test_display_strings() -> None:
    assert str(NOT_NULL) == "Not Null"
    assert str(UNIQUE) == "Unique"
    assert str(AUTO_INCREMENT) == "Auto_increment"
    assert str(Constraint.foreign_key("orders", "order_id")) == "orders(order_id)"


def test_foreign_keys_sorted_by_target() -> None:
    b = Constraint.foreign_key("b", "id")
    a = Constraint.foreign_key("a", "id")
    assert ordered_foreign_keys({b, NOT_NULL, a}) == [a, b]

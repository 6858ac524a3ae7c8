from __future__ import annotations

from relschema_mcp.builders import StatementResultBuilder, TableDescriptionBuilder
from relschema_mcp.reflection.constraints import AUTO_INCREMENT, NOT_NULL, Constraint
from relschema_mcp.reflection.schema import Attribute, Table
from relschema_mcp.reflection.types import AttributeType, TypeKind
from relschema_mcp.statements import render_create


def _orders() -> Table:
    return Table(
        name="orders",
        attributes=(
            Attribute("id", AttributeType(TypeKind.INT, 11), {AUTO_INCREMENT, NOT_NULL}),
            Attribute(
                "customer_id",
                AttributeType(TypeKind.INT, 11),
                {Constraint.foreign_key("customers", "id")},
            ),
        ),
        primary_key=0,
        skipped_columns=("location",),
    )


def test_table_description() -> None:
    desc = TableDescriptionBuilder.build(_orders())

    assert desc.table == "orders"
    assert desc.primary_key == "id"
    assert desc.skipped_columns == ["location"]
    first, second = desc.columns
    assert first.data_type == "int(11)"
    assert first.constraints == ["Not Null", "Auto_increment"]
    assert first.is_primary_key is True
    assert second.is_primary_key is False
    assert [(fk.table, fk.column) for fk in second.foreign_keys] == [("customers", "id")]


def test_statement_result_notes() -> None:
    table = _orders()

    create = StatementResultBuilder.build(table, "create", render_create(table))
    assert create.sql is not None
    assert create.sql.startswith("CREATE TABLE orders")
    assert any("location" in note for note in create.notes)

    empty_insert = StatementResultBuilder.build(table, "insert", None)
    assert empty_insert.sql is None
    assert any("nothing to insert" in note for note in empty_insert.notes)

    drop = StatementResultBuilder.build(table, "drop", "DROP TABLE orders")
    assert drop.notes == []

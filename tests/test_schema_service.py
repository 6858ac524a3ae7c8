from __future__ import annotations

import pytest
import sqlalchemy as sa

from conftest import FakeExecutor, column
from relschema_mcp.execute.runner import SqlAlchemyExecutor
from relschema_mcp.reflection.constraints import NOT_NULL
from relschema_mcp.reflection.schema import Attribute, Table
from relschema_mcp.reflection.types import AttributeType, TypeKind
from relschema_mcp.services import SchemaService, SchemaServiceManager


@pytest.fixture
def people() -> Table:
    return Table(
        name="people",
        attributes=(
            Attribute("id", AttributeType(TypeKind.INT, 11), {NOT_NULL}),
            Attribute("name", AttributeType(TypeKind.VARCHAR, 40)),
        ),
        primary_key=0,
    )


def test_render_each_kind(people: Table) -> None:
    service = SchemaService(FakeExecutor())
    assert service.render(people, "create") == (
        "CREATE TABLE people (id int(11) Not Null,name varchar(40), PRIMARY KEY(id))"
    )
    assert service.render(people, "drop") == "DROP TABLE people"
    assert service.render(people, "select") == "SELECT * FROM people"
    assert service.render(people, "insert", {"name": "'Ann'"}) == (
        "INSERT INTO people(name) VALUES ('Ann')"
    )
    assert service.render(people, "insert") is None
    with pytest.raises(ValueError, match="Unknown statement kind"):
        service.render(people, "update")  # type: ignore[arg-type]


def test_require_table() -> None:
    executor = FakeExecutor({"SHOW FULL COLUMNS FROM a": [column("x", "text")]})
    service = SchemaService(executor)
    assert service.require_table("a").name == "a"
    assert service.reflect("b") is None
    with pytest.raises(LookupError, match="does not exist"):
        service.require_table("b")


def test_statements_run_through_executor(people: Table) -> None:
    executor = FakeExecutor()
    service = SchemaService(executor)

    service.create(people)
    assert service.insert(people, {"id": "1"}) is True
    assert service.insert(people, {}) is False
    service.drop(people)

    assert executor.executed == [
        "CREATE TABLE people (id int(11) Not Null,name varchar(40), PRIMARY KEY(id))",
        "INSERT INTO people(id) VALUES (1)",
        "DROP TABLE people",
    ]


def test_round_trip_on_sqlite(people: Table) -> None:
    engine = sa.create_engine("sqlite+pysqlite:///:memory:")
    service = SchemaService(SqlAlchemyExecutor(engine))

    service.create(people)
    service.insert(people, {"id": "1", "name": "'Ann'"})
    service.insert(people, {"name": "'Bob'", "id": "2"})

    assert service.select_all(people) == [(1, "Ann"), (2, "Bob")]

    service.drop(people)
    assert not sa.inspect(engine).has_table("people")


def test_insert_values_with_colons_pass_through_verbatim(people: Table) -> None:
    engine = sa.create_engine("sqlite+pysqlite:///:memory:")
    service = SchemaService(SqlAlchemyExecutor(engine))

    service.create(people)
    service.insert(people, {"id": "1", "name": "'{\"a\":1}'"})
    service.insert(people, {"id": "2", "name": "'at 10:30 :name'"})

    assert service.select_all(people) == [(1, '{"a":1}'), (2, "at 10:30 :name")]


def test_manager_requires_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RELSCHEMA_MCP_DATABASE_URL", raising=False)
    SchemaServiceManager.reset_instance()
    try:
        with pytest.raises(ValueError, match="RELSCHEMA_MCP_DATABASE_URL"):
            SchemaServiceManager.get_instance().get_schema_service()
    finally:
        SchemaServiceManager.reset_instance()


def test_manager_builds_service_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELSCHEMA_MCP_DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.setenv("RELSCHEMA_MCP_STRICT_FOREIGN_KEYS", "false")
    SchemaServiceManager.reset_instance()
    try:
        mgr = SchemaServiceManager.get_instance()
        service = mgr.get_schema_service()
        assert service is mgr.get_schema_service()
        assert service.strict_foreign_keys is False
        assert isinstance(service.executor, SqlAlchemyExecutor)
    finally:
        SchemaServiceManager.reset_instance()

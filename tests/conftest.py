from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import pytest

from relschema_mcp.reflection.exceptions import ExecutionError, TableNotFoundError

T = TypeVar("T")


class FakeExecutor:
    """In-memory QueryExecutor keyed by exact statement text."""

    def __init__(self, responses: dict[str, list[Sequence[Any]]] | None = None) -> None:
        self.responses = dict(responses or {})
        self.failures: dict[str, ExecutionError] = {}
        self.statements: list[str] = []
        self.executed: list[str] = []

    def execute_rows(self, statement: str, row_mapper: Callable[[Sequence[Any]], T]) -> list[T]:
        self.statements.append(statement)
        if statement in self.failures:
            raise self.failures[statement]
        if statement not in self.responses:
            raise TableNotFoundError(statement, f"Table not found for {statement!r}")
        return [row_mapper(row) for row in self.responses[statement]]

    def execute_no_result(self, statement: str) -> None:
        self.executed.append(statement)


def column(
    name: str,
    raw_type: str,
    *,
    nullable: str = "YES",
    key: str = "",
    extra: str = "",
) -> tuple[Any, ...]:
    """A SHOW FULL COLUMNS row: Field, Type, Collation, Null, Key, Default, Extra, ..."""
    return (name, raw_type, None, nullable, key, None, extra, "select,insert", "")


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()

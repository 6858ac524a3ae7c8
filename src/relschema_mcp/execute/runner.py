"""Query execution for catalog reads and synthesized statements.

This module provides the two narrow contracts the reflection core consumes:
- ``execute_rows``: run a statement that returns rows and map each row
- ``execute_no_result``: run a statement that returns nothing

``SqlAlchemyExecutor`` implements both on top of a SQLAlchemy engine and
translates driver errors into the package's exception hierarchy.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import time
from typing import Any, Protocol, TypeVar, runtime_checkable

from fastmcp.utilities.logging import get_logger
import sqlalchemy as sa
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from relschema_mcp.reflection.constants import Constants
from relschema_mcp.reflection.exceptions import ExecutionError, TableNotFoundError

_logger = get_logger(__name__)

T = TypeVar("T")

RawRow = Sequence[Any]


@runtime_checkable
class QueryExecutor(Protocol):
    """Anything that can run statement strings against a database."""

    def execute_rows(self, statement: str, row_mapper: Callable[[RawRow], T]) -> list[T]:
        """Run a statement expected to return rows, mapping each row."""
        ...

    def execute_no_result(self, statement: str) -> None:
        """Run a statement not expected to return rows."""
        ...


def is_missing_table_error(exc: SQLAlchemyError) -> bool:
    """Return True when a driver error reports a nonexistent table."""
    orig = exc.orig if isinstance(exc, DBAPIError) else None
    args = getattr(orig, "args", ()) or ()
    if args and args[0] == Constants.MYSQL_NO_SUCH_TABLE:
        return True
    text = str(orig if orig is not None else exc).lower()
    return "doesn't exist" in text or "no such table" in text


class SqlAlchemyExecutor:
    """QueryExecutor backed by a SQLAlchemy engine.

    Each call checks out its own connection. ``execute_no_result`` runs in
    a transaction that commits on success. Statements go to the driver as
    given, without bind parameter parsing, so literals may contain ``:``.
    """

    def __init__(self, engine: sa.Engine) -> None:
        self.engine = engine

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @staticmethod
    def _raw(conn: sa.Connection) -> sa.Connection:
        # cursor.execute(statement) with no parameter collection
        return conn.execution_options(no_parameters=True)

    def _translate(self, statement: str, exc: SQLAlchemyError) -> ExecutionError:
        if is_missing_table_error(exc):
            return TableNotFoundError(statement, f"Table not found: {exc}")
        return ExecutionError(statement, f"Statement failed: {exc}")

    def execute_rows(self, statement: str, row_mapper: Callable[[RawRow], T]) -> list[T]:
        """Run ``statement`` and apply ``row_mapper`` to every returned row.

        Raises:
            TableNotFoundError: If the statement targets a missing table
            ExecutionError: If the statement fails for any other reason
        """
        _logger.debug("execute_rows: %s", statement)
        start = time.perf_counter()
        try:
            with self.engine.connect() as conn:
                result = self._raw(conn).exec_driver_sql(statement)
                mapped = [row_mapper(tuple(row)) for row in result]
        except SQLAlchemyError as exc:
            _logger.warning("Query failed (%s): %s", statement, exc)
            raise self._translate(statement, exc) from exc
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        _logger.debug("execute_rows: %d rows in %.1f ms", len(mapped), elapsed_ms)
        return mapped

    def execute_no_result(self, statement: str) -> None:
        """Run ``statement`` in a committed transaction.

        Raises:
            TableNotFoundError: If the statement targets a missing table
            ExecutionError: If the statement fails for any other reason
        """
        _logger.info("execute_no_result: %s", statement)
        try:
            with self.engine.begin() as conn:
                self._raw(conn).exec_driver_sql(statement)
        except SQLAlchemyError as exc:
            _logger.warning("Statement failed (%s): %s", statement, exc)
            raise self._translate(statement, exc) from exc

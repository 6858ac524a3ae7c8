"""Custom exception hierarchy for schema reflection.

This module defines the exceptions raised while reflecting a live table into
the typed schema model and while talking to the database through a query
executor. The hierarchy lets callers tell a malformed catalog apart from a
failing connection.

Exception Categories:
- Base exception for all reflection errors
- Type declaration errors for out-of-range sizes and unknown column types
- Foreign key resolution errors for unconfirmed MUL keys
- Execution errors for executor failures, including missing tables
"""

from __future__ import annotations


class RelSchemaError(Exception):
    """Base exception for relschema-mcp operations.

    All other custom exceptions in this module inherit from this class.
    """


class TypeDeclarationError(RelSchemaError):
    """Raised when a recognized column type carries an invalid size.

    The metadata is expected to be well formed. A declared width that does
    not fit the size range of its type (for example ``CHAR(300)``) means the
    catalog and the type model disagree.
    """

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid type declaration {raw!r}: {reason}")


class UnknownColumnTypeError(RelSchemaError):
    """Raised when a column type matches no known pattern.

    Only raised when the attribute builder runs with the ``raise`` policy;
    the default policy drops the column and logs a warning instead.
    """

    def __init__(self, table_name: str, column_name: str, raw_type: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        self.raw_type = raw_type
        super().__init__(
            f"Unrecognized type {raw_type!r} for column {table_name}.{column_name}"
        )


class ForeignKeyResolutionError(RelSchemaError):
    """Raised when a MUL-keyed column has no matching FOREIGN KEY clause.

    The column listing claims the column takes part in a foreign key, but
    the table definition text does not confirm it.
    """

    def __init__(self, table_name: str, column_name: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(
            f"No FOREIGN KEY clause found for column {column_name!r} "
            f"in definition of table {table_name!r}"
        )


class ExecutionError(RelSchemaError):
    """Raised when the query executor fails to run a statement.

    Wraps connection and query errors coming from the database driver.
    """

    def __init__(self, statement: str, message: str) -> None:
        self.statement = statement
        super().__init__(message)


class TableNotFoundError(ExecutionError):
    """Raised by an executor when the requested table does not exist."""

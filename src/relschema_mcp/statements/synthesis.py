"""Statement synthesis from reflected tables.

All functions are pure and side-effect-free. Names are emitted unquoted
and INSERT values are passed through verbatim: callers quote and escape
literals before rendering.
"""

from __future__ import annotations

from collections.abc import Mapping

from relschema_mcp.reflection.constraints import ordered_constraint_words
from relschema_mcp.reflection.schema import Attribute, Table
from relschema_mcp.reflection.types import render_type


def render_attribute(attr: Attribute) -> str:
    """Render one column definition for CREATE TABLE.

    Foreign keys follow as trailing ``FOREIGN KEY`` clauses.
    """
    head = f"{attr.name} {render_type(attr.data_type)}"
    words = ordered_constraint_words(attr.constraints)
    if words:
        head = f"{head} {' '.join(words)}"
    clauses = [
        f"FOREIGN KEY({attr.name}) REFERENCES {fk.referenced_table}({fk.referenced_attribute})"
        for fk in attr.foreign_keys()
    ]
    return ", ".join([head, *clauses])


def render_create(table: Table) -> str:
    """Render ``CREATE TABLE`` for a table."""
    body = ",".join(render_attribute(attr) for attr in table.attributes)
    pk = table.primary_key_attribute
    if pk is not None:
        return f"CREATE TABLE {table.name} ({body}, PRIMARY KEY({pk.name}))"
    return f"CREATE TABLE {table.name} ({body})"


def render_drop(table: Table) -> str:
    return f"DROP TABLE {table.name}"


def render_select_all(table: Table) -> str:
    return f"SELECT * FROM {table.name}"


def render_insert(table: Table, values: Mapping[str, str]) -> str | None:
    """Render ``INSERT INTO`` for the columns present in ``values``.

    Columns follow the table's declaration order, whatever the order of
    ``values``. Keys that are not columns of the table are ignored.

    Args:
        table: Target table
        values: Column name to literal SQL text, already quoted

    Returns:
        The statement, or None when no column of the table has a value
    """
    columns = [attr.name for attr in table.attributes if attr.name in values]
    if not columns:
        return None
    literals = [values[name] for name in columns]
    return f"INSERT INTO {table.name}({','.join(columns)}) VALUES ({','.join(literals)})"

"""Statement synthesis package.

Renders CREATE TABLE, DROP TABLE, SELECT * and INSERT statements from
reflected tables.
"""

from __future__ import annotations

from .synthesis import (
    render_attribute,
    render_create,
    render_drop,
    render_insert,
    render_select_all,
)

__all__ = [
    "render_attribute",
    "render_create",
    "render_drop",
    "render_insert",
    "render_select_all",
]

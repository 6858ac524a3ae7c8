"""Builders package for relschema-mcp.

This package contains builder classes responsible for constructing response
models from reflected tables.

Main Components:
- TableDescriptionBuilder: Builds TableDescription objects
- StatementResultBuilder: Builds StatementResult objects
"""

from .response_builders import (
    StatementResultBuilder,
    TableDescriptionBuilder,
)

__all__ = [
    "StatementResultBuilder",
    "TableDescriptionBuilder",
]

"""
sql_generator - SQL statement text formatting.

Stateless helpers that assemble SELECT, UPDATE, DELETE and INSERT statements.

Usage:
    >>> from sql_generator import build_insert
    >>> build_insert("items", ["id", "name"])
    'INSERT INTO items (id, name) VALUES (?, ?)'
"""

from .sql import (
    InvalidArgumentError,
    build_delete,
    build_insert,
    build_select,
    build_update,
    join_words,
    to_set_clause,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "build_delete",
    "build_insert",
    "build_select",
    "build_update",
    "join_words",
    "to_set_clause",
]

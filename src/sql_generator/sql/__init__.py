"""
SQL module for statement text generation.

Builds SELECT, UPDATE, DELETE and INSERT statements from table names,
column lists and condition fragments. Nothing is parsed or executed; the
caller supplies valid SQL fragments and binds placeholder values.
"""

from .core.errors import InvalidArgumentError
from .core.words import join_words, to_set_clause
from .operations.delete import build_delete
from .operations.insert import build_insert
from .operations.select import build_select
from .operations.update import build_update

__all__ = [
    "InvalidArgumentError",
    "join_words",
    "to_set_clause",
    "build_select",
    "build_update",
    "build_delete",
    "build_insert",
]

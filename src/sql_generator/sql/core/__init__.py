"""Core SQL formatting utilities package."""

from .errors import InvalidArgumentError, require_table, require_text
from .fragments import (
    ColumnSpec,
    ConditionSpec,
    resolve_columns,
    resolve_conditions,
    where_clause,
)
from .words import DEFAULT_PLACEHOLDER, join_words, to_set_clause

__all__ = [
    "InvalidArgumentError",
    "require_table",
    "require_text",
    "ColumnSpec",
    "ConditionSpec",
    "resolve_columns",
    "resolve_conditions",
    "where_clause",
    "DEFAULT_PLACEHOLDER",
    "join_words",
    "to_set_clause",
]

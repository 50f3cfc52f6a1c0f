"""
SQL INSERT statement builder.

Values are never embedded: one placeholder is emitted per column and the
caller binds the values when executing the statement.
"""

from typing import Sequence

from ..core.errors import InvalidArgumentError, require_table, require_text
from ..core.words import DEFAULT_PLACEHOLDER, join_words
from ._shared import logger, statement_built


def build_insert(
    table: str, columns: Sequence[str], *, placeholder: str = DEFAULT_PLACEHOLDER
) -> str:
    """
    Build a parameterized INSERT statement.

    Args:
        table: Table name (required)
        columns: Column names, at least one
        placeholder: Parameter marker emitted for each column

    Returns:
        INSERT SQL statement

    Raises:
        InvalidArgumentError: If table is missing, columns is empty or not a
            list of names, or placeholder is empty

    Examples:
        >>> build_insert("items", ["id", "name", "price"])
        'INSERT INTO items (id, name, price) VALUES (?, ?, ?)'
    """
    table = require_table(table)
    placeholder = require_text(placeholder, "placeholder", "placeholder must be specified")
    # A pre-joined string gives no reliable placeholder count
    if columns is None or isinstance(columns, str) or len(columns) == 0:
        message = "columns should contain at least one element"
        logger.debug("sql.invalid_argument", argument="columns", reason=message)
        raise InvalidArgumentError(message, argument="columns")

    column_sequence = join_words(columns)
    values = join_words([placeholder] * len(columns))
    sql = f"INSERT INTO {table} ({column_sequence}) VALUES ({values})"
    return statement_built("insert", table, sql)

"""
SQL UPDATE statement builder.

The assignments may be given as a literal SET clause ("price = 20, name = 'x'")
or as a list of column names, in which case every column is bound to a
parameter placeholder.
"""

from typing import Optional, Sequence, Union

from ..core.errors import require_table, require_text
from ..core.fragments import ConditionSpec, where_clause
from ..core.words import DEFAULT_PLACEHOLDER, to_set_clause
from ._shared import statement_built


def build_update(
    table: str,
    assignments: Optional[Union[str, Sequence[str]]],
    conditions: ConditionSpec = None,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """
    Build an UPDATE statement.

    Args:
        table: Table name (required)
        assignments: SET clause text, or list of columns to bind to placeholders
        conditions: WHERE body or list of condition fragments (optional)
        placeholder: Parameter marker used for the column-list form

    Returns:
        UPDATE SQL statement

    Raises:
        InvalidArgumentError: If table or the set clause is missing

    Examples:
        >>> build_update("items", "price = 20, name = 10", "id = 1")
        'UPDATE items SET price = 20, name = 10 WHERE id = 1'
        >>> build_update("items", ["id", "name"], "id = 1")
        'UPDATE items SET id = ?, name = ? WHERE id = 1'
    """
    table = require_table(table)
    if assignments is None or isinstance(assignments, str):
        set_clause = assignments
    else:
        set_clause = to_set_clause(assignments, placeholder=placeholder)
    set_clause = require_text(set_clause, "assignments", "set clause must be specified")

    sql = f"UPDATE {table} SET {set_clause}{where_clause(conditions)}"
    return statement_built("update", table, sql)

"""
SQL SELECT statement builder.
"""

from ..core.errors import require_table
from ..core.fragments import ColumnSpec, ConditionSpec, resolve_columns, where_clause
from ._shared import statement_built


def build_select(
    table: str, columns: ColumnSpec = None, conditions: ConditionSpec = None
) -> str:
    """
    Build a SELECT statement.

    Args:
        table: Table name (required)
        columns: Column sequence or list of column names; None or empty for *
        conditions: WHERE body or list of condition fragments; None or empty
            for no WHERE clause

    Returns:
        SELECT SQL statement

    Raises:
        InvalidArgumentError: If table is None or empty

    Examples:
        >>> build_select("items")
        'SELECT * FROM items'
        >>> build_select("items", ["id", "name"], ["id = 1", "AND", "price = 20"])
        'SELECT id, name FROM items WHERE id = 1 AND price = 20'
    """
    table = require_table(table)
    column_sequence = resolve_columns(columns) or "*"
    sql = f"SELECT {column_sequence} FROM {table}{where_clause(conditions)}"
    return statement_built("select", table, sql)

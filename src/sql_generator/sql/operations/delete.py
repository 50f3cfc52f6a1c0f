"""
SQL DELETE statement builder.
"""

from ..core.errors import require_table
from ..core.fragments import ConditionSpec, where_clause
from ._shared import statement_built


def build_delete(table: str, conditions: ConditionSpec = None) -> str:
    """
    Build a DELETE statement; without conditions every row is targeted.

    Examples:
        >>> build_delete("items", ["id = 1", "AND", "price > 20"])
        'DELETE FROM items WHERE id = 1 AND price > 20'
    """
    table = require_table(table)
    sql = f"DELETE FROM {table}{where_clause(conditions)}"
    return statement_built("delete", table, sql)

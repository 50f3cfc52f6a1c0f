"""
Normalization of flexible column and condition arguments.

Every builder accepts columns and conditions either as ready-made text or as
a list of words. These helpers resolve both shapes to plain text once, so the
statement builders only ever format strings.
"""

from typing import Optional, Sequence, Union

from .words import join_words

ColumnSpec = Optional[Union[str, Sequence[str]]]
ConditionSpec = Optional[Union[str, Sequence[str]]]


def resolve_columns(columns: ColumnSpec) -> str:
    """
    Resolve a column specification to a column sequence.

    Args:
        columns: "id, name", ["id", "name"] or None

    Returns:
        The column sequence, "" when no columns were given

    Examples:
        >>> resolve_columns(["id", "name"])
        'id, name'
        >>> resolve_columns("id, name")
        'id, name'
    """
    if columns is None:
        return ""
    if isinstance(columns, str):
        return columns
    return join_words(columns)


def resolve_conditions(conditions: ConditionSpec) -> str:
    """
    Resolve a condition specification to the body of a WHERE clause.

    List elements are joined with single spaces so that boolean operators can
    be passed as their own elements.

    Examples:
        >>> resolve_conditions(["id = 1", "AND", "price > 20"])
        'id = 1 AND price > 20'
    """
    if conditions is None:
        return ""
    if isinstance(conditions, str):
        return conditions
    return join_words(conditions, add_space=False, separator=" ")


def where_clause(conditions: ConditionSpec) -> str:
    """Return " WHERE <conditions>", or "" when there are no conditions."""
    body = resolve_conditions(conditions)
    return f" WHERE {body}" if body else ""

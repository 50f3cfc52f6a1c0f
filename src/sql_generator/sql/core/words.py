"""
Word sequence helpers.

Low-level joins used to turn column and condition lists into the text that
appears inside a statement.
"""

from typing import Optional, Sequence

from .errors import require_text

DEFAULT_SEPARATOR = ","
DEFAULT_PLACEHOLDER = "?"


def join_words(
    words: Optional[Sequence[str]],
    add_space: bool = True,
    separator: Optional[str] = DEFAULT_SEPARATOR,
) -> str:
    """
    Join an ordered sequence of words with a separator.

    Args:
        words: Words to join; None is treated as empty
        add_space: Append a single space after each separator
        separator: Separator text; None or "" falls back to ","

    Returns:
        Separated word sequence without a trailing separator

    Examples:
        >>> join_words(["Hello", "Yellow", "Jello"])
        'Hello, Yellow, Jello'
        >>> join_words(["id = 1", "AND", "price = 20"], add_space=False, separator=" ")
        'id = 1 AND price = 20'
        >>> join_words([])
        ''
    """
    if not words:
        return ""
    glue = separator or DEFAULT_SEPARATOR
    if add_space:
        glue += " "
    return glue.join(words)


def to_set_clause(
    columns: Optional[Sequence[str]], *, placeholder: str = DEFAULT_PLACEHOLDER
) -> str:
    """
    Build the parameterized assignment list of an UPDATE statement.

    Args:
        columns: Column names in assignment order
        placeholder: Parameter marker bound to each column

    Returns:
        ``"col = ?"`` pairs joined with ", "; "" for no columns

    Raises:
        InvalidArgumentError: If placeholder is empty

    Examples:
        >>> to_set_clause(["id", "name", "price"])
        'id = ?, name = ?, price = ?'
        >>> to_set_clause(["id"], placeholder="%s")
        'id = %s'
    """
    require_text(placeholder, "placeholder", "placeholder must be specified")
    if not columns:
        return ""
    return join_words([f"{column} = {placeholder}" for column in columns])

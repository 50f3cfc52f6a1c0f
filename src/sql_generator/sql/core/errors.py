"""
Argument validation errors raised by the statement builders.
"""

from typing import Optional

from sql_generator.utils.logging import get_logger

logger = get_logger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a builder receives an argument it cannot format.

    Attributes:
        argument: Name of the offending parameter (e.g. ``"table"``)
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


def require_text(value: Optional[str], argument: str, message: str) -> str:
    """
    Return ``value`` unchanged if it is a non-empty string.

    Args:
        value: Candidate value (table name, set clause, placeholder)
        argument: Parameter name reported on the raised error
        message: Error message used when the value is missing

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If value is None or empty
    """
    if value is None or value == "":
        logger.debug("sql.invalid_argument", argument=argument, reason=message)
        raise InvalidArgumentError(message, argument=argument)
    return value


def require_table(table: Optional[str]) -> str:
    """Validate the table name shared by every statement kind."""
    return require_text(table, "table", "table name must be specified")

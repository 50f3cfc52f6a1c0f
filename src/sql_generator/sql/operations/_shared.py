"""Helpers shared by the statement builders."""

from sql_generator.utils.logging import get_logger, load_settings

logger = get_logger("sql_generator.sql.operations")


def statement_built(kind: str, table: str, statement: str) -> str:
    """Log a finished statement when statement logging is enabled and return it."""
    if load_settings().log_statements:
        logger.debug("sql.statement_built", kind=kind, table=table, statement=statement)
    return statement

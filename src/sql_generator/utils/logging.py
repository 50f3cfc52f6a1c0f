"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stderr + optional rotating file)

Configuration is loaded from sql_generator.config.settings:
- SQLGEN_LOG_LEVEL: Log level for the ``sql_generator`` logger tree. Default: WARNING
- SQLGEN_LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- SQLGEN_LOG_FILE_DIR: Directory for log files. Default: logs/

Handlers are attached to the ``sql_generator`` logger, which does not
propagate to the root logger, and loggers are wrapped individually instead of
through ``structlog.configure``. The host application's stdlib and structlog
configuration are left untouched.

Usage:
    >>> from sql_generator.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("sql.statement_built", kind="select", table="items")
"""

import logging
import sys
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, List

import structlog
from pydantic import ValidationError
from structlog.types import Processor

from sql_generator.config import Settings, get_settings

PACKAGE_LOGGER = "sql_generator"

PROCESSORS: List[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]

_configured = False
_installed_handlers: List[logging.Handler] = []


def load_settings() -> Settings:
    """Get settings, falling back to defaults when the environment is invalid.

    A malformed ``SQLGEN_*`` variable must not break statement building, so
    validation errors yield an unvalidated default ``Settings`` instance.
    """
    try:
        return get_settings()
    except ValidationError:
        return Settings.model_construct()


def _get_log_level(settings: Settings) -> int:
    """Get log level from settings, falling back to WARNING."""
    return getattr(logging, settings.log_level.upper(), logging.WARNING)


def _get_log_file_path(log_dir: Path) -> Path:
    """Get the log file path with date-based naming."""
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: sql-generator-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"sql-generator-{date_str}.log"


def configure_logging(force: bool = False) -> None:
    """Configure the ``sql_generator`` stdlib logger tree.

    Sets up:
    - Log level
    - stderr handler
    - Optional daily rotating file handler

    Calling it again is a no-op unless ``force`` is set, in which case the
    handlers installed by a previous call are replaced. Handlers added by
    anyone else are kept.

    Args:
        force: Re-read settings and rebuild handlers even if already configured
    """
    global _configured
    if _configured and not force:
        return

    settings = load_settings()
    level = _get_log_level(settings)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    stderr_handler.setLevel(level)
    _installed_handlers.append(stderr_handler)

    if settings.log_to_file:
        log_file = _get_log_file_path(Path(settings.log_file_dir))
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        file_handler.setLevel(level)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        package_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger wrapping the stdlib logger ``name``.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger with JSON rendering
    """
    configure_logging()
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def bind_context(**kwargs: Any) -> Any:
    """Create a package logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., kind="update", table="items")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(kind="insert", table="items")
        >>> logger.debug("sql.statement_built", columns=3)
        # Emits: {"kind": "insert", "table": "items", "columns": 3,
        #         "event": "sql.statement_built", ...}
    """
    return get_logger(PACKAGE_LOGGER).bind(**kwargs)

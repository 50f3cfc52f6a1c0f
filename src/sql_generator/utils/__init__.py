"""Shared utilities."""

from .logging import bind_context, configure_logging, get_logger, load_settings

__all__ = [
    "bind_context",
    "configure_logging",
    "get_logger",
    "load_settings",
]

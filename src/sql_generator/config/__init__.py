"""Configuration management for sql_generator.

Usage:
    >>> from sql_generator.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'WARNING'
"""

from sql_generator.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]

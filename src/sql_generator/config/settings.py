"""
Configuration management for sql_generator.

Settings are loaded from environment variables (``SQLGEN_`` prefix) and an
optional ``.env`` file using Pydantic BaseSettings. Only the logging side of
the library is configurable; generated statement text never depends on
settings.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = ".env"


def resolve_env_file(override: Optional[str] = None) -> str:
    """
    Return the .env path to read, relative paths resolving against the cwd.

    Args:
        override: Value of SQLGEN_ENV_FILE, if set

    Returns:
        The override with ~ expanded, or ".env" in the working directory
    """
    if override:
        return str(Path(override).expanduser())
    return DEFAULT_ENV_FILE


SETTINGS_ENV_FILE = resolve_env_file(os.getenv("SQLGEN_ENV_FILE"))


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Environment variables are loaded with the SQLGEN_ prefix. For example,
    SQLGEN_LOG_LEVEL=DEBUG overrides the log_level setting.
    """

    log_level: str = Field(
        default="WARNING",
        description="Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(
        default="logs", description="Directory for rotating log files"
    )
    log_statements: bool = Field(
        default=False,
        description="Emit a debug event with the text of every built statement",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SQLGEN_",
        env_file=SETTINGS_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()

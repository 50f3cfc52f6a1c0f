"""Unit tests for the configuration layer.

Tests verify:
- Defaults when no environment variables are set
- SQLGEN_ prefixed environment overrides
- Log level validation
- Cached get_settings behavior
"""

import pytest
from pydantic import ValidationError

from sql_generator.config.settings import Settings, get_settings, resolve_env_file


@pytest.mark.unit
def test_defaults():
    """Library defaults keep logging quiet."""
    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.log_to_file is False
    assert settings.log_file_dir == "logs"
    assert settings.log_statements is False


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    """SQLGEN_ prefixed variables override defaults."""
    monkeypatch.setenv("SQLGEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("SQLGEN_LOG_STATEMENTS", "true")
    monkeypatch.setenv("SQLGEN_LOG_FILE_DIR", "/tmp/sqlgen-logs")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.log_statements is True
    assert settings.log_file_dir == "/tmp/sqlgen-logs"


@pytest.mark.unit
def test_env_file_values(tmp_path):
    """Values can come from a .env file."""
    env_path = tmp_path / "custom.env"
    env_path.write_text("SQLGEN_LOG_LEVEL=ERROR\nSQLGEN_LOG_TO_FILE=1\n")

    settings = Settings(_env_file=str(env_path))

    assert settings.log_level == "ERROR"
    assert settings.log_to_file is True


@pytest.mark.unit
def test_invalid_log_level_rejected(monkeypatch):
    """Unknown level names fail validation."""
    monkeypatch.setenv("SQLGEN_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert "log level" in str(exc_info.value).lower()


@pytest.mark.unit
def test_get_settings_is_cached():
    """get_settings returns the same instance until the cache is cleared."""
    first = get_settings()
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings() is not first


@pytest.mark.unit
def test_default_env_file_is_relative_to_cwd():
    """Without SQLGEN_ENV_FILE the .env file is looked up in the working directory."""
    assert resolve_env_file(None) == ".env"
    assert resolve_env_file("") == ".env"
    assert Settings.model_config["env_file"] == ".env"


@pytest.mark.unit
def test_env_file_override_expands_user(monkeypatch, tmp_path):
    """SQLGEN_ENV_FILE is used as given, with ~ expanded."""
    monkeypatch.setenv("HOME", str(tmp_path))

    assert resolve_env_file("/etc/sqlgen.env") == "/etc/sqlgen.env"
    assert resolve_env_file("~/sqlgen.env") == str(tmp_path / "sqlgen.env")


@pytest.mark.unit
def test_env_file_read_from_working_directory(monkeypatch, tmp_path):
    """A .env file in the working directory is picked up by default."""
    (tmp_path / ".env").write_text("SQLGEN_LOG_STATEMENTS=true\n")
    monkeypatch.chdir(tmp_path)

    assert Settings().log_statements is True

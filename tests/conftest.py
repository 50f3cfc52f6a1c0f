"""Pytest configuration shared by the sql_generator test suites."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from sql_generator.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings, unaffected by the host env."""
    for key in list(os.environ):
        if key.upper().startswith("SQLGEN_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

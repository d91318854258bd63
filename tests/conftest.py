"""Shared fixtures for the issuekit test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from issuekit.settings import get_settings

# Unlikely to exist anywhere above a pytest tmp_path.
CONFIG_NAME = ".issuekit-test-config.yml"


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings and any ISSUEKIT_* / NO_COLOR overrides around each test."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    for var in ("ISSUEKIT_HOME_DIR", "ISSUEKIT_PLAIN", "ISSUEKIT_JSON_INDENT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """A throwaway home directory wired in through ISSUEKIT_HOME_DIR."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("ISSUEKIT_HOME_DIR", str(path))
    get_settings.cache_clear()
    return path


@pytest.fixture
def config_name() -> str:
    return CONFIG_NAME

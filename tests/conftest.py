"""Shared test fixtures."""

import pytest

from conditional_demo.settings import get_settings

SETTINGS_ENV_VARS = [
    "CONDITIONAL_DEMO_HOST",
    "CONDITIONAL_DEMO_PORT",
    "CONDITIONAL_DEMO_LOG_LEVEL",
    "CONDITIONAL_DEMO_RELOAD",
    "CONDITIONAL_DEMO_PROFILE",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the process environment and the settings cache."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
        monkeypatch.delenv(var.lower(), raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

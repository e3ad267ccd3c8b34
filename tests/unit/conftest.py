"""Pytest configuration and shared fixtures for the antigravity-ua test suite."""

from collections.abc import Generator

import pytest

from antigravity_ua.config import (
    APP_VERSION_ENV,
    REMOTE_VERSION_ENABLED_ENV,
    VERSION_URL_ENV,
    get_settings,
)
from antigravity_ua.user_agent import reset_user_agent


@pytest.fixture(autouse=True)
def clean_env_and_caches(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear configuration variables and process-wide caches around each test."""
    for var in (
        APP_VERSION_ENV,
        REMOTE_VERSION_ENABLED_ENV,
        VERSION_URL_ENV,
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    reset_user_agent()
    yield
    get_settings.cache_clear()
    reset_user_agent()

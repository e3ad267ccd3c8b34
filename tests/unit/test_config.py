"""Tests for antigravity_ua.config module."""

import pytest
from pydantic import ValidationError

import antigravity_ua
from antigravity_ua.config import (
    APP_VERSION_ENV,
    DEFAULT_VERSION_URL,
    ENV_PREFIX,
    REMOTE_VERSION_ENABLED_ENV,
    VERSION_URL_ENV,
    Settings,
    get_settings,
)


def test_defaults() -> None:
    """Defaults come from the build version and keep remote lookup off."""
    settings = Settings()
    assert settings.app_version == antigravity_ua.__version__
    assert settings.remote_version_enabled is False
    assert settings.version_url == DEFAULT_VERSION_URL


def test_env_prefix() -> None:
    """All variables share the ANTIGRAVITY_ prefix."""
    assert ENV_PREFIX == "ANTIGRAVITY_"
    assert APP_VERSION_ENV == "ANTIGRAVITY_APP_VERSION"


@pytest.mark.parametrize(
    "env_name,attr,value,expected",
    [
        (APP_VERSION_ENV, "app_version", "2.0.1", "2.0.1"),
        (APP_VERSION_ENV.lower(), "app_version", "3.4.5", "3.4.5"),
        (REMOTE_VERSION_ENABLED_ENV, "remote_version_enabled", "true", True),
        (
            VERSION_URL_ENV,
            "version_url",
            "https://updates.example.test",
            "https://updates.example.test",
        ),
    ],
)
def test_env_overrides(
    env_name: str,
    attr: str,
    value: str,
    expected: object,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Environment variables override defaults, case-insensitively."""
    monkeypatch.setenv(env_name, value)
    settings = Settings()
    assert getattr(settings, attr) == expected


def test_app_version_whitespace_is_stripped(monkeypatch: pytest.MonkeyPatch) -> None:
    """Surrounding whitespace in the version is ignored."""
    monkeypatch.setenv(APP_VERSION_ENV, "  1.2.3\n")
    assert Settings().app_version == "1.2.3"


@pytest.mark.parametrize(
    "value",
    ["1.2", "v1.2.3", "1.2.3-beta", "latest", "", "\u0661.\u0662.\u0663", "\uff11.\uff12.\uff13"],
)
def test_invalid_app_version(value: str, monkeypatch: pytest.MonkeyPatch) -> None:
    """A configured version must be a bare X.Y.Z triple."""
    monkeypatch.setenv(APP_VERSION_ENV, value)
    with pytest.raises(ValidationError) as exc:
        Settings()
    assert "Application version must look like X.Y.Z" in str(exc.value)


def test_version_url_requires_https(monkeypatch: pytest.MonkeyPatch) -> None:
    """The updater endpoint must use HTTPS."""
    monkeypatch.setenv(VERSION_URL_ENV, "http://updates.example.test")
    with pytest.raises(ValidationError) as exc:
        Settings()
    assert "Version URL must use HTTPS" in str(exc.value)


def test_settings_are_immutable() -> None:
    """Settings cannot be mutated after construction."""
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.app_version = "9.9.9"  # type: ignore[misc]


def test_get_settings_is_cached() -> None:
    """get_settings returns the same instance until the cache is cleared."""
    first = get_settings()
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings() is not first


def test_get_settings_logs_and_reraises(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Invalid configuration is logged at CRITICAL and re-raised."""
    monkeypatch.setenv(APP_VERSION_ENV, "not-a-version")
    with caplog.at_level("CRITICAL", logger="antigravity_ua.config"):
        with pytest.raises(ValidationError):
            get_settings()
    assert "Failed to initialize application configuration" in caplog.text

"""Application configuration management using Pydantic Settings.

This module provides centralized configuration for User-Agent construction,
loading and validating settings from environment variables. The build-time
application version is the default for ``app_version``; an override is only
accepted if it is a plain ``major.minor.patch`` triple.
"""

import logging
from functools import lru_cache
from typing import ClassVar, Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from antigravity_ua import __version__
from antigravity_ua.version import is_version

logger = logging.getLogger(__name__)

# Environment variable prefix constants
ENV_PREFIX_NAME: Final[str] = "ANTIGRAVITY"
ENV_PREFIX_DELIMITER: Final[str] = "_"
ENV_PREFIX: Final[str] = f"{ENV_PREFIX_NAME}{ENV_PREFIX_DELIMITER}"

# Environment variable name constants - dynamically generated from prefix
APP_VERSION_ENV: Final[str] = f"{ENV_PREFIX}APP_VERSION"
REMOTE_VERSION_ENABLED_ENV: Final[str] = f"{ENV_PREFIX}REMOTE_VERSION_ENABLED"
VERSION_URL_ENV: Final[str] = f"{ENV_PREFIX}VERSION_URL"

DEFAULT_VERSION_URL: Final[str] = (
    "https://antigravity-auto-updater-974169037036.us-central1.run.app"
)


class Settings(BaseSettings):
    """User-Agent configuration loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    app_version: str = Field(
        default=__version__,
        description="Application version embedded at build time",
        validation_alias=APP_VERSION_ENV,
    )

    # Remote lookup stays off: the updater can report an older version than
    # the one upstream accepts.
    remote_version_enabled: bool = Field(
        default=False,
        description="Consult the remote updater endpoint before the build version",
        validation_alias=REMOTE_VERSION_ENABLED_ENV,
    )

    version_url: str = Field(
        default=DEFAULT_VERSION_URL,
        description="Auto-updater endpoint reporting the latest stable version",
        validation_alias=VERSION_URL_ENV,
    )

    @field_validator("app_version")
    @classmethod
    def validate_app_version(cls, v: str) -> str:
        """Validate that the application version is a dotted triple."""
        v = v.strip()
        if not is_version(v):
            raise ValueError("Application version must look like X.Y.Z (e.g. 1.15.8)")
        return v

    @field_validator("version_url")
    @classmethod
    def validate_version_url(cls, v: str) -> str:
        """Validate that the updater endpoint uses HTTPS."""
        v = v.strip()
        if not v.startswith("https://"):
            raise ValueError("Version URL must use HTTPS (https://)")
        return v

    def model_post_init(self, __context: object, /) -> None:
        """Log configuration after initialization."""
        logger.info(
            "User-Agent configuration loaded",
            extra={
                "app_version": self.app_version,
                "remote_version_enabled": self.remote_version_enabled,
            },
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings

    Raises:
        ValidationError: If settings are invalid
    """
    try:
        return Settings()
    except Exception:
        logger.critical(
            "Failed to initialize application configuration",
            exc_info=True,
        )
        raise

"""User-Agent string generation for upstream API requests.

This module builds the User-Agent header shared by every outbound request:

    antigravity/<version> <os>/<arch>

The version comes from the remote updater when that lookup is enabled and
succeeds, otherwise from the version embedded at build time. The string is
computed once per process on first use; every later caller gets the same
cached value.
"""

import logging
import threading
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError

from antigravity_ua import __version__
from antigravity_ua.config import Settings, get_settings
from antigravity_ua.platform_info import arch_name, os_name
from antigravity_ua.version import ResolvedVersion, VersionSource

logger = logging.getLogger(__name__)

PRODUCT_NAME: Final[str] = "antigravity"
USER_AGENT_HEADER: Final[str] = "User-Agent"


class UserAgent(BaseModel):
    """The components of a resolved User-Agent and its header rendering."""

    model_config = ConfigDict(frozen=True)

    product: str = PRODUCT_NAME
    version: str
    source: VersionSource
    os_name: str
    arch: str

    @property
    def header_value(self) -> str:
        """The User-Agent header value, e.g. ``antigravity/1.15.8 windows/amd64``."""
        return f"{self.product}/{self.version} {self.os_name}/{self.arch}"

    def __str__(self) -> str:
        return self.header_value


def fetch_remote_version(settings: Settings) -> ResolvedVersion | None:
    """Look up the latest version from the auto-updater endpoint.

    Remote lookup is disabled: the updater has reported versions older than
    the client actually ships, which upstream rejects. No request is made and
    None is returned so the caller falls back to the build version.

    Args:
        settings: Application settings holding the updater URL.

    Returns:
        Always None.
    """
    logger.debug(
        "Remote version lookup unavailable, using build version",
        extra={"version_url": settings.version_url},
    )
    return None


def resolve_version(settings: Settings) -> ResolvedVersion:
    """Pick the version to report, remote first and build version second."""
    if settings.remote_version_enabled:
        remote = fetch_remote_version(settings)
        if remote is not None:
            return remote
    return ResolvedVersion(settings.app_version, VersionSource.BUILD_FALLBACK)


def build_user_agent(settings: Settings | None = None) -> UserAgent:
    """Construct a User-Agent for the running platform.

    This does not touch the process-wide cache; use :func:`get_user_agent`
    for the shared value.

    Args:
        settings: Settings to resolve the version from. Defaults to the cached
            application settings; if those fail validation the build version
            is used instead.

    Returns:
        The resolved User-Agent components.
    """
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            logger.warning(
                "Invalid User-Agent configuration, using build version",
                extra={"version": __version__},
            )
    if settings is None:
        version, source = __version__, VersionSource.BUILD_FALLBACK
    else:
        version, source = resolve_version(settings)
    return UserAgent(version=version, source=source, os_name=os_name(), arch=arch_name())


class _LazyUserAgent:
    """Thread-safe, compute-once holder for the process User-Agent."""

    def __init__(self) -> None:
        self._value: tuple[UserAgent, str] | None = None
        self._lock = threading.Lock()

    def get(self) -> tuple[UserAgent, str]:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            # Another thread may have finished while we waited on the lock.
            if self._value is None:
                user_agent = build_user_agent()
                header = user_agent.header_value
                logger.info(
                    "User-Agent initialized",
                    extra={
                        "version": user_agent.version,
                        "source": user_agent.source.value,
                        "user_agent": header,
                    },
                )
                self._value = (user_agent, header)
            return self._value

    def clear(self) -> None:
        with self._lock:
            self._value = None


_user_agent = _LazyUserAgent()


def get_user_agent_info() -> UserAgent:
    """Return the process-wide User-Agent components, building them on first use."""
    return _user_agent.get()[0]


def get_user_agent() -> str:
    """Return the process-wide User-Agent header value.

    The first call resolves the version and platform and logs the result;
    all later calls return the identical cached string.
    """
    return _user_agent.get()[1]


def user_agent_headers() -> dict[str, str]:
    """Headers to merge into an HTTP client's defaults."""
    return {USER_AGENT_HEADER: get_user_agent()}


def reset_user_agent() -> None:
    """Discard the cached User-Agent so the next call rebuilds it.

    Intended for tests; the value is otherwise constant for the process.
    """
    _user_agent.clear()

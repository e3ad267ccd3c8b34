"""Operating system and CPU architecture tokens for the User-Agent.

Python reports platform names inconsistently across systems (``AMD64`` on
Windows, ``x86_64`` on Linux, ``arm64`` on macOS, ``aarch64`` on Linux ARM).
These helpers normalise them to the short lowercase tokens used in the
header, e.g. ``windows/amd64`` or ``darwin/arm64``.
"""

import logging
import platform
from typing import Final

logger = logging.getLogger(__name__)

UNKNOWN: Final[str] = "unknown"

_OS_ALIASES: Final[dict[str, str]] = {
    "windows": "windows",
    "win32": "windows",
    "darwin": "darwin",
    "macos": "darwin",
    "linux": "linux",
}

# POSIX layers on Windows report e.g. "CYGWIN_NT-10.0-19045" or "MINGW64_NT-10.0".
_WINDOWS_SYSTEM_PREFIXES: Final[tuple[str, ...]] = ("cygwin_nt", "mingw", "msys_nt")

_ARCH_ALIASES: Final[dict[str, str]] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "armv8": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv7l": "arm",
    "armv6l": "arm",
}


def _normalise(raw: str, aliases: dict[str, str]) -> str:
    key = "".join(raw.split()).lower()
    if not key:
        return UNKNOWN
    return aliases.get(key, key)


def os_name() -> str:
    """Return the normalised name of the running operating system."""
    raw = platform.system()
    name = _normalise(raw, _OS_ALIASES)
    if name.startswith(_WINDOWS_SYSTEM_PREFIXES):
        name = "windows"
    logger.debug("Detected operating system", extra={"raw": raw, "os": name})
    return name


def arch_name() -> str:
    """Return the normalised name of the running CPU architecture."""
    raw = platform.machine()
    name = _normalise(raw, _ARCH_ALIASES)
    logger.debug("Detected architecture", extra={"raw": raw, "arch": name})
    return name

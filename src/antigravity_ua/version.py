"""Semantic version extraction from free-form text.

The updater endpoint and other version sources return human-oriented text
(e.g. ``"Stable Version: 1.15.8-5724687216017408"``). This module pulls the
first ``major.minor.patch`` triple out of such text.
"""

import re
from enum import Enum
from typing import Final, NamedTuple

# Compiled once at import, shared by every call.
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+\.\d+\.\d+")

# Configured versions end up in an HTTP header, so only ASCII digits count.
_STRICT_VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+\.\d+\.\d+", re.ASCII)


class VersionSource(str, Enum):
    """Where a resolved version came from. Used for logging only."""

    REMOTE = "remote"
    BUILD_FALLBACK = "build_fallback"


class ResolvedVersion(NamedTuple):
    """A version string together with its provenance."""

    version: str
    source: VersionSource


def parse_version(text: str) -> str | None:
    """Extract the first ``X.Y.Z`` version from text.

    Anything after the third number (pre-release tags, build metadata) is not
    part of the match.

    Args:
        text: Arbitrary text that may contain a version.

    Returns:
        The matched version (e.g. ``"1.15.8"``), or None if the text holds no
        dotted triple.
    """
    match = VERSION_PATTERN.search(text)
    return match.group(0) if match else None


def is_version(text: str) -> bool:
    """Return True if the whole of text is exactly one ASCII ``X.Y.Z`` triple."""
    return _STRICT_VERSION_PATTERN.fullmatch(text) is not None

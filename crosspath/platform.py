"""Platform detection shared across crosspath modules.

Only two path grammars exist: Windows drive-letter paths and everything else,
which follows the POSIX grammar. Detection honours an environment override so
test suites can emulate Windows without running on it.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
import typing as t

logger = logging.getLogger(__name__)

# Test suites set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "CROSSPATH_PLATFORM_OVERRIDE"

# Platform names starting with this prefix (``"Windows"``, ``"win32"``) select
# the Windows grammar once normalised.
_WINDOWS_PREFIX: t.Final[str] = "win"


class PlatformFamily(enum.Enum):
    """Path grammar families understood by crosspath."""

    UNIX = "unix"
    WINDOWS = "windows"


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        logger.debug(
            "Using platform override %r from %s", override, PLATFORM_OVERRIDE_ENV
        )
        return _normalise(override)

    return _normalise(sys.platform)


def platform_family(hint: str | PlatformFamily | None = None) -> PlatformFamily:
    """Return the grammar family for *hint* (default: the running platform)."""
    if isinstance(hint, PlatformFamily):
        return hint
    if _current_platform(hint).startswith(_WINDOWS_PREFIX):
        return PlatformFamily.WINDOWS
    return PlatformFamily.UNIX


__all__ = ["PLATFORM_OVERRIDE_ENV", "PlatformFamily", "platform_family"]

"""Tests for platform family detection."""

from __future__ import annotations

import pytest

import crosspath.platform as platform
from crosspath.platform import PlatformFamily


@pytest.mark.parametrize("hint", ["Windows", "win32", "  WINDOWS ", "win"])
def test_windows_hints_select_windows(hint: str) -> None:
    """Any hint starting with ``win`` selects the Windows grammar."""
    assert platform.platform_family(hint) is PlatformFamily.WINDOWS


@pytest.mark.parametrize("hint", ["Linux", "darwin", "BSD", "Solaris", "unknown-os"])
def test_other_hints_select_unix(hint: str) -> None:
    """Everything that is not Windows maps to the Unix grammar."""
    assert platform.platform_family(hint) is PlatformFamily.UNIX


def test_family_hint_passes_through() -> None:
    """An explicit family needs no interpretation."""
    assert platform.platform_family(PlatformFamily.WINDOWS) is PlatformFamily.WINDOWS
    assert platform.platform_family(PlatformFamily.UNIX) is PlatformFamily.UNIX


def test_host_platform_used_without_hint(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without hint or override, ``sys.platform`` decides."""
    monkeypatch.delenv(platform.PLATFORM_OVERRIDE_ENV, raising=False)
    monkeypatch.setattr(platform.sys, "platform", "win32")
    assert platform.platform_family() is PlatformFamily.WINDOWS
    monkeypatch.setattr(platform.sys, "platform", "linux")
    assert platform.platform_family() is PlatformFamily.UNIX


def test_override_env_forces_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests can force alternate platforms via the override environment variable."""
    monkeypatch.setattr(platform.sys, "platform", "linux")
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "Windows")
    assert platform.platform_family() is PlatformFamily.WINDOWS


def test_explicit_hint_beats_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """A caller-supplied hint wins over the environment override."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
    assert platform.platform_family("linux") is PlatformFamily.UNIX


def test_empty_override_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty override falls back to the host platform."""
    monkeypatch.setattr(platform.sys, "platform", "darwin")
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "")
    assert platform.platform_family() is PlatformFamily.UNIX

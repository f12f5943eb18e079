"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from crosspath.platform import PLATFORM_OVERRIDE_ENV

pytest_plugins = ("crosspath.pytest_plugin", "pytester")


@pytest.fixture(autouse=True)
def clear_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Keep a developer's platform override from leaking into tests."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield

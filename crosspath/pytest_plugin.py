"""Pytest plugin providing path resolver fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .platform import PlatformFamily
from .registry import ResolverRegistry

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from .resolver import PathResolver

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("crosspath")
    group.addoption(
        "--path-platform",
        action="store",
        dest="path_platform",
        default=None,
        help=(
            "Platform whose path grammar the path_resolver fixture uses "
            "(for example 'Windows' or 'Linux'). Overrides the ini setting."
        ),
    )
    parser.addini(
        "path_platform",
        (
            "Platform whose path grammar the path_resolver fixture uses. "
            "Defaults to the running platform."
        ),
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "path_platform(platform): select the path grammar used by the "
            "path_resolver fixture for a single test."
        ),
    )


def _platform_hint(request: pytest.FixtureRequest) -> str | PlatformFamily | None:
    """Return the platform requested for the ``path_resolver`` fixture."""
    # Priority order: marker > fixture param > CLI option > INI setting

    marker_value = _get_marker_platform(request)
    if marker_value is not None:
        return marker_value

    param_value = _get_param_platform(request)
    if param_value is not None:
        return param_value

    config = request.config
    cli_value = config.getoption("path_platform")
    if cli_value:
        return str(cli_value)

    ini_value = config.getini("path_platform")
    return str(ini_value) if ini_value else None


def _get_marker_platform(request: pytest.FixtureRequest) -> str | None:
    """Return the ``path_platform`` marker argument if present."""
    marker = request.node.get_closest_marker("path_platform")
    if marker is None:
        return None
    if marker.args:
        return str(marker.args[0])
    if "platform" in marker.kwargs:
        return str(marker.kwargs["platform"])
    msg = "path_platform marker requires a platform argument"
    raise TypeError(msg)


def _get_param_platform(request: pytest.FixtureRequest) -> str | PlatformFamily | None:
    """Return the indirect fixture parameter if present."""
    param = getattr(request, "param", None)
    if param is None:
        return None
    if isinstance(param, str | PlatformFamily):
        return param
    msg = (
        "path_resolver fixture param must be a platform name or PlatformFamily, "
        f"got {type(param).__name__}"
    )
    raise TypeError(msg)


@pytest.fixture
def path_registry() -> ResolverRegistry:
    """Provide a fresh :class:`ResolverRegistry` for the test."""
    return ResolverRegistry()


@pytest.fixture
def unix_resolver(path_registry: ResolverRegistry) -> PathResolver:
    """Provide the POSIX path resolver."""
    return path_registry.get(PlatformFamily.UNIX)


@pytest.fixture
def windows_resolver(path_registry: ResolverRegistry) -> PathResolver:
    """Provide the Windows drive-letter path resolver."""
    return path_registry.get(PlatformFamily.WINDOWS)


@pytest.fixture
def path_resolver(
    request: pytest.FixtureRequest, path_registry: ResolverRegistry
) -> PathResolver:
    """Provide the resolver selected by marker, param, option or host platform."""
    hint = _platform_hint(request)
    resolver = path_registry.get(hint)
    logger.debug(
        "path_resolver fixture using %s (hint=%r)", type(resolver).__name__, hint
    )
    return resolver

"""Memoised selection of the resolver matching a platform."""

from __future__ import annotations

import logging
import threading
import typing as t

from .platform import PlatformFamily, platform_family
from .resolver import UnixPathResolver, WindowsPathResolver

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from .resolver import PathResolver

logger = logging.getLogger(__name__)

_RESOLVER_TYPES: t.Final[dict[PlatformFamily, type[PathResolver]]] = {
    PlatformFamily.UNIX: UnixPathResolver,
    PlatformFamily.WINDOWS: WindowsPathResolver,
}


class ResolverRegistry:
    """Create each platform's resolver once and hand out the same instance.

    Registries are ordinary values: construct one and pass it to the code that
    needs resolvers. Resolvers are stateless, so sharing them across threads
    is safe; the lock only guards first-time construction.
    """

    def __init__(self) -> None:
        self._instances: dict[PlatformFamily, PathResolver] = {}
        self._lock = threading.Lock()

    def get(self, platform_hint: str | PlatformFamily | None = None) -> PathResolver:
        """Return the resolver for *platform_hint* (default: running platform).

        Hints starting with ``"win"`` (case-insensitive) select Windows; any
        other hint selects the Unix grammar.
        """
        family = platform_family(platform_hint)
        with self._lock:
            resolver = self._instances.get(family)
            if resolver is None:
                resolver = _RESOLVER_TYPES[family]()
                self._instances[family] = resolver
                logger.debug("Created %s for %s", type(resolver).__name__, family.value)
        return resolver

    def clear(self) -> None:
        """Forget every memoised resolver."""
        with self._lock:
            self._instances.clear()

    def __contains__(self, family: object) -> bool:
        """Return ``True`` when a resolver for *family* has been created."""
        return family in self._instances


_DEFAULT_REGISTRY: t.Final[ResolverRegistry] = ResolverRegistry()


def get_resolver(
    platform_hint: str | PlatformFamily | None = None,
    *,
    registry: ResolverRegistry | None = None,
) -> PathResolver:
    """Return the resolver for *platform_hint* from *registry*.

    The package-wide default registry is used when *registry* is omitted.
    """
    if registry is None:
        registry = _DEFAULT_REGISTRY
    return registry.get(platform_hint)


__all__ = ["ResolverRegistry", "get_resolver"]

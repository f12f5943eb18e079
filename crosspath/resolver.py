"""Resolvers combining a base path and a fragment into a normalised path."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._path_utils import coerce_path_string
from .grammar import UNIX_GRAMMAR, WINDOWS_GRAMMAR, PathGrammar
from .normalizer import clean_path
from .relative import relative_path as _relative_path

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import os

    from .platform import PlatformFamily

    PathInput = os.PathLike[str] | str


class PathResolver(t.Protocol):
    """Operations every platform resolver provides."""

    @property
    def platform(self) -> PlatformFamily:
        """Return the platform family the resolver implements."""
        ...

    @property
    def separator(self) -> str:
        """Return the separator character of the platform."""
        ...

    def is_absolute_path(self, path: PathInput) -> bool:
        """Return ``True`` if *path* is absolute."""
        ...

    def drive(self, path: PathInput) -> str | None:
        """Return the drive prefix of *path*, if the platform has drives."""
        ...

    def clean(self, path: PathInput) -> str:
        """Return *path* with ``.`` and ``..`` segments resolved."""
        ...

    def resolve(self, base: PathInput, path: PathInput) -> str:
        """Return *path* resolved against *base*."""
        ...

    def relative_path(
        self, base: PathInput, path: PathInput, *, force: bool = False
    ) -> str:
        """Return *path* expressed relative to *base*."""
        ...


@dc.dataclass(frozen=True, slots=True)
class _GrammarResolver:
    """Resolver behaviour expressed purely in terms of a grammar."""

    grammar: PathGrammar

    @property
    def platform(self) -> PlatformFamily:
        return self.grammar.platform

    @property
    def separator(self) -> str:
        return self.grammar.separator

    def is_absolute_path(self, path: PathInput) -> bool:
        """Return ``True`` if *path* is absolute under the bound grammar."""
        return self.grammar.is_absolute(coerce_path_string(path))

    def drive(self, path: PathInput) -> str | None:
        """Return the drive prefix of *path*, or ``None``."""
        return self.grammar.drive(coerce_path_string(path))

    def clean(self, path: PathInput) -> str:
        """Return the normalised form of *path*."""
        return clean_path(coerce_path_string(path), self.grammar)

    def resolve(self, base: PathInput, path: PathInput) -> str:
        """Resolve *path* against *base*.

        An absolute *path* discards *base*. Otherwise the two are joined with
        the separator and the result is cleaned; a drive or root prefix is
        carried through unchanged. Excess ``..`` segments are dropped rather
        than reported.
        """
        base_text = coerce_path_string(base, name="base")
        path_text = coerce_path_string(path)
        if self.grammar.is_absolute(path_text):
            return clean_path(path_text, self.grammar)
        return clean_path(base_text + self.grammar.separator + path_text, self.grammar)

    def relative_path(
        self, base: PathInput, path: PathInput, *, force: bool = False
    ) -> str:
        """Return *path* relative to *base*; see :func:`crosspath.relative_path`."""
        return _relative_path(
            coerce_path_string(base, name="base"),
            coerce_path_string(path),
            self.grammar,
            force=force,
        )


@dc.dataclass(frozen=True, slots=True)
class UnixPathResolver(_GrammarResolver):
    """Resolver for ``/``-separated POSIX paths."""

    grammar: PathGrammar = UNIX_GRAMMAR


@dc.dataclass(frozen=True, slots=True)
class WindowsPathResolver(_GrammarResolver):
    r"""Resolver for ``\``-separated drive-letter paths.

    Relative paths are only computed between paths on the same drive; the
    drive letter itself is never cleaned or case-folded.
    """

    grammar: PathGrammar = WINDOWS_GRAMMAR


__all__ = ["PathResolver", "UnixPathResolver", "WindowsPathResolver"]

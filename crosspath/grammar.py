"""Per-platform path grammars.

A grammar knows the separator of its platform, how to recognise an absolute
path and which prefix of an absolute path (its *root*) must survive
normalisation untouched.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

from .platform import PlatformFamily

_DRIVE_RE: t.Final[re.Pattern[str]] = re.compile(r"[A-Za-z]:")


class PathGrammar(t.Protocol):
    """Capabilities shared by every platform grammar."""

    @property
    def platform(self) -> PlatformFamily:
        """Return the family this grammar implements."""
        ...

    @property
    def separator(self) -> str:
        """Return the single separator character."""
        ...

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` if *path* is absolute under this grammar."""
        ...

    def drive(self, path: str) -> str | None:
        """Return the drive prefix of *path*, or ``None``."""
        ...

    def root(self, path: str) -> str:
        """Return the prefix of *path* that normalisation preserves verbatim."""
        ...


@dc.dataclass(frozen=True, slots=True)
class UnixGrammar:
    """POSIX paths: ``/`` separated, absolute when rooted at ``/``."""

    separator: str = "/"

    @property
    def platform(self) -> PlatformFamily:
        """Return :attr:`PlatformFamily.UNIX`."""
        return PlatformFamily.UNIX

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` when *path* starts with the separator."""
        return path.startswith(self.separator)

    def drive(self, path: str) -> str | None:
        """Unix paths never carry a drive."""
        del path
        return None

    def root(self, path: str) -> str:
        """Return ``"/"`` for absolute paths and ``""`` otherwise."""
        return self.separator if self.is_absolute(path) else ""


@dc.dataclass(frozen=True, slots=True)
class WindowsGrammar:
    r"""Drive-letter paths: ``\`` separated, absolute when prefixed by ``X:``."""

    separator: str = "\\"

    @property
    def platform(self) -> PlatformFamily:
        """Return :attr:`PlatformFamily.WINDOWS`."""
        return PlatformFamily.WINDOWS

    def drive(self, path: str) -> str | None:
        """Return everything up to and including the first ``:``.

        ``None`` is returned when *path* contains no colon. The prefix is not
        validated; see :meth:`is_absolute`.
        """
        position = path.find(":")
        if position == -1:
            return None
        return path[: position + 1]

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` when the drive prefix is a single ASCII letter."""
        drive = self.drive(path)
        return drive is not None and _DRIVE_RE.fullmatch(drive) is not None

    def root(self, path: str) -> str:
        """Return the drive of an absolute *path*, or ``""`` for relative ones."""
        if not self.is_absolute(path):
            return ""
        return t.cast("str", self.drive(path))


UNIX_GRAMMAR: t.Final[UnixGrammar] = UnixGrammar()
WINDOWS_GRAMMAR: t.Final[WindowsGrammar] = WindowsGrammar()


def grammar_for(platform: PlatformFamily) -> PathGrammar:
    """Return the shared grammar instance for *platform*."""
    if platform is PlatformFamily.WINDOWS:
        return WINDOWS_GRAMMAR
    return UNIX_GRAMMAR


__all__ = [
    "UNIX_GRAMMAR",
    "WINDOWS_GRAMMAR",
    "PathGrammar",
    "UnixGrammar",
    "WindowsGrammar",
    "grammar_for",
]

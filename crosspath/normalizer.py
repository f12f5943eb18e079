"""Split, clean and join path segments.

The pipeline ``split -> clean -> join`` removes ``.`` segments and resolves
``..`` against the segment preceding it. A ``..`` with nothing left to consume
is dropped, so a cleaned path never climbs above its starting point.
"""

from __future__ import annotations

import functools
import re
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from .grammar import PathGrammar

CURRENT_DIR: t.Final[str] = "."
PARENT_DIR: t.Final[str] = ".."


@functools.cache
def _separator_run(separator: str) -> re.Pattern[str]:
    return re.compile(f"{re.escape(separator)}+")


def split_path(path: str, separator: str) -> list[str]:
    """Split *path* on runs of *separator*, dropping empty end segments."""
    return [part for part in _separator_run(separator).split(path) if part]


def clean_segments(segments: t.Sequence[str]) -> list[str]:
    """Return *segments* with ``.`` removed and ``..`` collapsed.

    The scan runs left to right over a copy. A ``..`` at index ``i > 0``
    removes itself and segment ``i - 1``; the scan then continues from the
    element that moved into position ``i - 1`` so collapses cascade.
    """
    parts = list(segments)
    i = 0
    while i < len(parts):
        part = parts[i]
        if part == CURRENT_DIR or (i == 0 and part == PARENT_DIR):
            del parts[i]
            continue
        if part == PARENT_DIR:
            del parts[i - 1 : i + 1]
            i -= 1
            continue
        i += 1
    return parts


def join_path(segments: t.Iterable[str], separator: str) -> str:
    """Join *segments* with *separator* without a trailing separator."""
    return separator.join(segments)


def clean_path(path: str, grammar: PathGrammar) -> str:
    """Normalise *path* under *grammar*, preserving its root verbatim."""
    separator = grammar.separator
    root = grammar.root(path)
    segments = clean_segments(split_path(path[len(root) :], separator))
    body = join_path(segments, separator)
    if not root:
        return body
    if root.endswith(separator):
        return root + body
    return root + separator + body


__all__ = ["clean_path", "clean_segments", "join_path", "split_path"]

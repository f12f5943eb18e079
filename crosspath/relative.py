"""Shortest relative path between two absolute paths."""

from __future__ import annotations

import logging
import typing as t

from .normalizer import CURRENT_DIR, PARENT_DIR, join_path, split_path

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from .grammar import PathGrammar

logger = logging.getLogger(__name__)


def _common_prefix_length(base: t.Sequence[str], target: t.Sequence[str]) -> int:
    """Return how many leading segments *base* and *target* share."""
    n = min(len(base), len(target))
    i = 0
    while i < n and base[i] == target[i]:
        i += 1
    return i


def relative_path(
    base: str, target: str, grammar: PathGrammar, *, force: bool = False
) -> str:
    """Return *target* expressed relative to *base*.

    Parameters
    ----------
    base : str
        Absolute directory the result is relative to.
    target : str
        Absolute path to express.
    grammar : PathGrammar
        Grammar supplying the separator and drive extraction.
    force : bool, optional
        Return a relative form even when the paths share no leading segment.
        Paths on different drives are always returned unchanged.

    Returns
    -------
    str
        ``"."`` when both paths are equal, ``"./..."`` for descendants of
        *base*, a ``"../..."`` form otherwise, or *target* unchanged when no
        relative form applies.
    """
    base_drive = grammar.drive(base)
    target_drive = grammar.drive(target)
    if base_drive != target_drive:
        logger.debug(
            "No relative path from drive %r to drive %r; returning %r",
            base_drive,
            target_drive,
            target,
        )
        return target

    separator = grammar.separator
    base_parts = split_path(base.strip(separator), separator)
    target_parts = split_path(target.strip(separator), separator)
    common = _common_prefix_length(base_parts, target_parts)

    if common == 0 and not force:
        return target

    remaining = len(base_parts) - common
    result = (
        (PARENT_DIR + separator) * remaining
        + join_path(target_parts[common:], separator)
    ).rstrip(separator)
    if not result:
        return CURRENT_DIR
    if remaining == 0:
        return CURRENT_DIR + separator + result
    return result


__all__ = ["relative_path"]

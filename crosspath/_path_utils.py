"""Shared helpers for turning caller input into path strings."""

from __future__ import annotations

import os

from .errors import PathTypeError


def coerce_path_string(path: os.PathLike[str] | str, *, name: str = "path") -> str:
    """Return *path* as text, accepting strings and ``os.PathLike`` objects."""
    if isinstance(path, str):
        return path
    if not isinstance(path, os.PathLike):
        raise PathTypeError(name, path)
    value = os.fspath(path)
    if not isinstance(value, str):
        raise PathTypeError(name, value)
    return value

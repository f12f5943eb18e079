"""Cross-platform logical path resolution.

Resolve fragments against base paths, test for absolute paths and compute
minimal relative paths under POSIX or Windows drive-letter grammar, without
touching the filesystem.
"""

from __future__ import annotations

from .errors import CrossPathError, PathTypeError
from .grammar import (
    UNIX_GRAMMAR,
    WINDOWS_GRAMMAR,
    PathGrammar,
    UnixGrammar,
    WindowsGrammar,
    grammar_for,
)
from .normalizer import clean_path, clean_segments, join_path, split_path
from .platform import PLATFORM_OVERRIDE_ENV, PlatformFamily, platform_family
from .registry import ResolverRegistry, get_resolver
from .relative import relative_path
from .resolver import PathResolver, UnixPathResolver, WindowsPathResolver

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "UNIX_GRAMMAR",
    "WINDOWS_GRAMMAR",
    "CrossPathError",
    "PathGrammar",
    "PathResolver",
    "PathTypeError",
    "PlatformFamily",
    "ResolverRegistry",
    "UnixGrammar",
    "UnixPathResolver",
    "WindowsGrammar",
    "WindowsPathResolver",
    "clean_path",
    "clean_segments",
    "get_resolver",
    "grammar_for",
    "join_path",
    "platform_family",
    "relative_path",
    "split_path",
]

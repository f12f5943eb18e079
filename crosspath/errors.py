"""Exception hierarchy for crosspath."""

from __future__ import annotations


class CrossPathError(Exception):
    """Base class for all crosspath errors."""


class PathTypeError(CrossPathError, TypeError):
    """Raised when a path argument is neither text nor a text ``PathLike``.

    Parameters
    ----------
    argument : str
        Name of the offending argument.
    value : object
        The rejected value.

    Attributes
    ----------
    argument : str
        Name of the offending argument.
    value : object
        The rejected value.
    """

    def __init__(self, argument: str, value: object) -> None:
        msg = f"{argument} must be str or os.PathLike[str], got {type(value).__name__}"
        super().__init__(msg)
        self.argument = argument
        self.value = value


__all__ = ["CrossPathError", "PathTypeError"]

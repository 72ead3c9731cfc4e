"""Exceptions raised by dialect-path operations."""

from __future__ import annotations

import typing as t

_MAX_REPR_LENGTH: t.Final[int] = 28


def _describe(actual: object) -> str:
    """Return a short, human-readable description of *actual*."""
    if actual is None:
        return "None"
    shown = repr(actual)
    if len(shown) > _MAX_REPR_LENGTH:
        shown = f"{shown[:_MAX_REPR_LENGTH - 3]}..."
    return f"type {type(actual).__name__} ({shown})"


class DialectPathError(Exception):
    """Base class for dialect-path errors."""


class InvalidArgumentTypeError(DialectPathError, TypeError):
    """
    Raised when a path argument is not a string.

    Parameters
    ----------
    name : str
        The argument name as reported to the caller, for example ``"path"``,
        ``"paths[2]"``, ``"from"`` or ``"to"``.
    actual : object
        The rejected value.

    Attributes
    ----------
    name : str
        The argument name.
    actual : object
        The rejected value.
    """

    def __init__(self, name: str, actual: object) -> None:
        msg = f'The "{name}" argument must be of type str. Received {_describe(actual)}'
        super().__init__(msg)
        self.name = name
        self.actual = actual


class InvalidArgumentShapeError(DialectPathError, TypeError):
    """Raised when ``format`` receives components that are not a mapping."""

    def __init__(self, name: str, actual: object) -> None:
        msg = (
            f'The "{name}" argument must be a mapping of path components. '
            f"Received {_describe(actual)}"
        )
        super().__init__(msg)
        self.name = name
        self.actual = actual


__all__ = [
    "DialectPathError",
    "InvalidArgumentShapeError",
    "InvalidArgumentTypeError",
]

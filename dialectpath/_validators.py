"""Shared validation helpers."""

from __future__ import annotations

import collections.abc as cabc

from .errors import InvalidArgumentShapeError, InvalidArgumentTypeError


def validate_string(value: object, name: str) -> None:
    """Ensure *value* is a ``str``, reporting it as argument *name* otherwise."""
    if not isinstance(value, str):
        raise InvalidArgumentTypeError(name, value)


def validate_object(value: object, name: str) -> None:
    """Ensure *value* is a key-value mapping such as a ``dict``."""
    if not isinstance(value, cabc.Mapping):
        raise InvalidArgumentShapeError(name, value)

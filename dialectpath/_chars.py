"""Character classification shared by the POSIX and Windows dialects."""

from __future__ import annotations

import typing as t

FORWARD_SLASH: t.Final[str] = "/"
BACKWARD_SLASH: t.Final[str] = "\\"
DOT: t.Final[str] = "."
COLON: t.Final[str] = ":"
QUESTION_MARK: t.Final[str] = "?"


def char_at(path: str, index: int) -> str:
    """Return ``path[index]``, or an empty string when *index* is out of range."""
    if 0 <= index < len(path):
        return path[index]
    return ""


def is_path_separator(char: str) -> bool:
    """Return ``True`` for either slash (Windows accepts both)."""
    return char in (FORWARD_SLASH, BACKWARD_SLASH)


def is_posix_path_separator(char: str) -> bool:
    """Return ``True`` only for the forward slash."""
    return char == FORWARD_SLASH


def is_windows_device_root(char: str) -> bool:
    """Return ``True`` for an ASCII letter usable as a drive letter."""
    return len(char) == 1 and ("A" <= char <= "Z" or "a" <= char <= "z")


def has_drive_prefix(path: str) -> bool:
    """Return ``True`` when *path* starts with a drive letter and colon."""
    return is_windows_device_root(char_at(path, 0)) and char_at(path, 1) == COLON


__all__ = [
    "BACKWARD_SLASH",
    "COLON",
    "DOT",
    "FORWARD_SLASH",
    "QUESTION_MARK",
    "char_at",
    "has_drive_prefix",
    "is_path_separator",
    "is_posix_path_separator",
    "is_windows_device_root",
]

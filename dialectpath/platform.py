"""Host platform detection and path dialect selection.

Centralising the logic keeps the "which dialect is the default" decision in
one place and lets tests force a dialect without spawning a different OS.
"""

from __future__ import annotations

import logging
import os
import sys
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .dialect import PathDialect

logger = logging.getLogger(__name__)

# Tests set this override to emulate alternative hosts (for example Windows)
# when choosing the default dialect.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "DIALECTPATH_PLATFORM_OVERRIDE"

# ``sys.platform`` / ``os.name`` prefixes that identify a Windows-like host.
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win", "nt")

_DIALECT_ALIASES: t.Final[dict[str, str]] = {
    "posix": "posix",
    "win32": "win32",
    "windows": "win32",
    "nt": "win32",
}


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def is_windows(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current host) is Windows-like."""
    return _current_platform(platform).startswith(_WINDOWS_PREFIXES)


def dialect_name(dialect: str | None = None) -> str:
    """
    Map *dialect* to ``"posix"`` or ``"win32"``.

    Explicit dialect names and their aliases are honoured first; anything else
    (including ``None``) is treated as a platform name and classified with
    :func:`is_windows`.
    """
    if dialect is not None:
        name = _DIALECT_ALIASES.get(_normalise(dialect))
        if name is not None:
            return name
    return "win32" if is_windows(dialect) else "posix"


def select_dialect(dialect: str | None = None) -> PathDialect:
    """Return the dialect engine for *dialect*, or the host default."""
    name = dialect_name(dialect)
    logger.debug("Selected %s path dialect (requested %r)", name, dialect)
    if name == "win32":
        from ._win32 import win32

        return win32

    from ._posix import posix

    return posix


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "dialect_name",
    "is_windows",
    "select_dialect",
]

"""Working-directory capabilities consulted by the path dialects."""

from __future__ import annotations

import dataclasses as dc
import os
import sys
import typing as t

from .platform import is_windows

# Windows keeps per-drive working directories in hidden ``=C:`` style
# environment variables.
DRIVE_CWD_ENV_PREFIX: t.Final[str] = "="

# Interpreters without a real filesystem; their working directory is the root.
_VIRTUAL_FS_PLATFORMS: t.Final[tuple[str, ...]] = ("emscripten", "wasi")


def process_cwd() -> str:
    """Return the process working directory, or ``/`` on virtual hosts."""
    if sys.platform in _VIRTUAL_FS_PLATFORMS:
        return "/"
    return os.getcwd()


def no_drive_cwd(device: str) -> str | None:  # noqa: ARG001 - capability signature
    """Report that no drive-specific working directory is known."""
    return None


def env_drive_cwd(device: str) -> str | None:
    """Return the working directory recorded for *device* (e.g. ``C:``), if any."""
    return os.environ.get(f"{DRIVE_CWD_ENV_PREFIX}{device}")


@dc.dataclass(frozen=True, slots=True)
class PathEnvironment:
    """
    Implicit inputs read by ``resolve`` and friends.

    Attributes
    ----------
    cwd : Callable[[], str]
        Returns the current working directory. Called on every resolution
        that runs out of absolute arguments.
    drive_cwd : Callable[[str], str | None]
        Returns the working directory for a drive such as ``"C:"``, or
        ``None`` when unknown. Only the Windows dialect consults it.
    host_is_windows : bool
        Whether the host uses Windows paths. The POSIX dialect converts a
        Windows working directory into POSIX form when this is set.
    """

    cwd: t.Callable[[], str] = process_cwd
    drive_cwd: t.Callable[[str], str | None] = no_drive_cwd
    host_is_windows: bool = dc.field(default_factory=is_windows)


DEFAULT_ENVIRONMENT: t.Final[PathEnvironment] = PathEnvironment()


__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DRIVE_CWD_ENV_PREFIX",
    "PathEnvironment",
    "env_drive_cwd",
    "no_drive_cwd",
    "process_cwd",
]

"""The operation set shared by every path dialect."""

from __future__ import annotations

import abc
import dataclasses as dc
import typing as t

from ._chars import DOT
from ._format import ParsedPath, format_path
from ._validators import validate_string
from .environment import DEFAULT_ENVIRONMENT, PathEnvironment

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

_DialectT = t.TypeVar("_DialectT", bound="BaseDialect")


class PathDialect(t.Protocol):
    """Stateless bundle of path operations for one path syntax."""

    name: str
    sep: str
    delimiter: str

    def resolve(self, *paths: str) -> str:
        """Resolve *paths* right to left into an absolute path."""
        ...

    def normalize(self, path: str) -> str:
        """Collapse redundant separators and dot segments in *path*."""
        ...

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` when *path* is absolute."""
        ...

    def join(self, *paths: str) -> str:
        """Join the non-empty *paths* and normalise the result."""
        ...

    def relative(self, from_: str, to: str) -> str:
        """Return the relative path from *from_* to *to*."""
        ...

    def to_namespaced_path(self, path: str) -> str:
        """Return the namespaced form of *path* where the dialect has one."""
        ...

    def dirname(self, path: str) -> str:
        """Return the directory portion of *path*."""
        ...

    def basename(self, path: str, suffix: str | None = None) -> str:
        """Return the last portion of *path*, minus *suffix* if it matches."""
        ...

    def extname(self, path: str) -> str:
        """Return the extension of the last portion of *path*."""
        ...

    def format(self, components: cabc.Mapping[str, t.Any]) -> str:
        """Build a path from parsed *components*."""
        ...

    def parse(self, path: str) -> ParsedPath:
        """Split *path* into root, dir, base, name and ext."""
        ...

    @property
    def posix(self) -> PathDialect:
        """The POSIX dialect."""
        ...

    @property
    def win32(self) -> PathDialect:
        """The Windows dialect."""
        ...


@dc.dataclass(frozen=True, slots=True)
class _TailScan:
    """Positions found while scanning the last path component backwards."""

    start_part: int
    start_dot: int
    end: int
    pre_dot_state: int

    @property
    def has_extension(self) -> bool:
        """Return ``True`` when the component carries a non-empty extension."""
        if self.start_dot == -1 or self.end == -1:
            return False
        # A dot directly at the start of the component (".bashrc")
        if self.pre_dot_state == 0:
            return False
        # The component is exactly ".."
        return not (
            self.pre_dot_state == 1
            and self.start_dot == self.end - 1
            and self.start_dot == self.start_part + 1
        )


class BaseDialect(abc.ABC):
    """Behaviour common to the POSIX and Windows dialects."""

    name: t.ClassVar[str]
    sep: t.ClassVar[str]
    delimiter: t.ClassVar[str]

    __slots__ = ("_env",)

    def __init__(self, *, env: PathEnvironment | None = None) -> None:
        self._env = env if env is not None else DEFAULT_ENVIRONMENT

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def env(self) -> PathEnvironment:
        """The working-directory capabilities this dialect consults."""
        return self._env

    def with_environment(self: _DialectT, env: PathEnvironment) -> _DialectT:
        """Return a copy of this dialect that consults *env*."""
        return type(self)(env=env)

    @property
    def posix(self) -> PathDialect:
        """The POSIX dialect (``self`` when this is the POSIX dialect)."""
        if self.name == "posix":
            return t.cast("PathDialect", self)
        from ._posix import posix

        return posix

    @property
    def win32(self) -> PathDialect:
        """The Windows dialect (``self`` when this is the Windows dialect)."""
        if self.name == "win32":
            return t.cast("PathDialect", self)
        from ._win32 import win32

        return win32

    @abc.abstractmethod
    def _is_separator(self, char: str) -> bool:
        """Return ``True`` when *char* separates path segments."""

    def _component_start(self, path: str) -> int:
        """Return the first index that may belong to a file name."""
        return 0

    def _scan_tail(self, path: str, start: int) -> _TailScan:
        """Scan the last component of *path* backwards, stopping at *start*."""
        start_dot = -1
        start_part = start
        end = -1
        matched_slash = True
        # 0: nothing seen before the first dot, 1: only dots, -1: other chars
        pre_dot_state = 0
        for i in range(len(path) - 1, start - 1, -1):
            char = path[i]
            if self._is_separator(char):
                if not matched_slash:
                    start_part = i + 1
                    break
                continue
            if end == -1:
                matched_slash = False
                end = i + 1
            if char == DOT:
                if start_dot == -1:
                    start_dot = i
                elif pre_dot_state != 1:
                    pre_dot_state = 1
            elif start_dot != -1:
                pre_dot_state = -1
        return _TailScan(start_part, start_dot, end, pre_dot_state)

    def _parse_tail(self, path: str, start: int) -> tuple[int, str, str, str]:
        """Return ``(start_part, base, name, ext)`` for the last component."""
        scan = self._scan_tail(path, start)
        if scan.end == -1:
            return scan.start_part, "", "", ""
        base = path[scan.start_part : scan.end]
        if not scan.has_extension:
            return scan.start_part, base, base, ""
        return (
            scan.start_part,
            base,
            path[scan.start_part : scan.start_dot],
            path[scan.start_dot : scan.end],
        )

    def basename(self, path: str, suffix: str | None = None) -> str:
        """
        Return the last portion of *path*.

        Trailing separators are ignored. When *suffix* matches the end of the
        last portion it is removed; a partial match leaves the portion intact.
        """
        if suffix is not None:
            validate_string(suffix, "suffix")
        validate_string(path, "path")
        start = self._component_start(path)
        end = -1
        matched_slash = True

        if suffix and len(suffix) <= len(path):
            if suffix == path:
                return ""
            ext_idx = len(suffix) - 1
            first_non_slash_end = -1
            for i in range(len(path) - 1, start - 1, -1):
                char = path[i]
                if self._is_separator(char):
                    if not matched_slash:
                        start = i + 1
                        break
                    continue
                if first_non_slash_end == -1:
                    matched_slash = False
                    first_non_slash_end = i + 1
                if ext_idx >= 0:
                    if char == suffix[ext_idx]:
                        ext_idx -= 1
                        if ext_idx == -1:
                            end = i
                    else:
                        ext_idx = -1
                        end = first_non_slash_end

            if start == end:
                end = first_non_slash_end
            elif end == -1:
                end = len(path)
            return path[start:end]

        for i in range(len(path) - 1, start - 1, -1):
            if self._is_separator(path[i]):
                if not matched_slash:
                    start = i + 1
                    break
            elif end == -1:
                matched_slash = False
                end = i + 1

        if end == -1:
            return ""
        return path[start:end]

    def extname(self, path: str) -> str:
        """Return the extension of *path*, from the last ``.`` to the end."""
        validate_string(path, "path")
        scan = self._scan_tail(path, self._component_start(path))
        if not scan.has_extension:
            return ""
        return path[scan.start_dot : scan.end]

    def format(self, components: cabc.Mapping[str, t.Any]) -> str:
        """Build a path from *components* using this dialect's separator."""
        return format_path(self.sep, components)


__all__ = ["BaseDialect", "PathDialect"]

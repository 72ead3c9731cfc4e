"""POSIX path dialect: ``/`` is the only separator and there are no drives."""

from __future__ import annotations

import logging
import typing as t

from ._chars import BACKWARD_SLASH, FORWARD_SLASH, is_posix_path_separator
from ._format import ParsedPath
from ._normalize import normalize_string
from ._validators import validate_string
from .dialect import BaseDialect

logger = logging.getLogger(__name__)


class PosixDialect(BaseDialect):
    """Path operations for forward-slash separated paths."""

    name: t.ClassVar[str] = "posix"
    sep: t.ClassVar[str] = FORWARD_SLASH
    delimiter: t.ClassVar[str] = ":"

    __slots__ = ()

    def _is_separator(self, char: str) -> bool:
        return is_posix_path_separator(char)

    def _cwd(self) -> str:
        """Return the working directory in POSIX form."""
        cwd = self._env.cwd()
        validate_string(cwd, "cwd")
        if not self._env.host_is_windows:
            return cwd
        # Turn ``C:\Users\me`` into ``/Users/me``.
        cwd = cwd.replace(BACKWARD_SLASH, FORWARD_SLASH)
        return cwd[cwd.find(FORWARD_SLASH) :]

    def resolve(self, *paths: str) -> str:
        """
        Resolve *paths* into an absolute path.

        Arguments are processed right to left, each prepended to the result
        until an absolute path is built; the working directory is used last.
        Empty arguments are skipped.
        """
        resolved_path = ""
        resolved_absolute = False

        for i in range(len(paths) - 1, -2, -1):
            if resolved_absolute:
                break
            if i >= 0:
                path = paths[i]
                validate_string(path, f"paths[{i}]")
            else:
                path = self._cwd()
                logger.debug("Resolving %r against cwd %r", resolved_path, path)

            if not path:
                continue

            resolved_path = f"{path}/{resolved_path}"
            resolved_absolute = path[0] == FORWARD_SLASH

        # A relative result is still possible when the cwd provider returns a
        # relative path.
        resolved_path = normalize_string(
            resolved_path, not resolved_absolute, FORWARD_SLASH, is_posix_path_separator
        )

        if resolved_absolute:
            return f"/{resolved_path}"
        return resolved_path or "."

    def normalize(self, path: str) -> str:
        """Normalise *path*, keeping a leading and a trailing ``/``."""
        validate_string(path, "path")
        if not path:
            return "."

        is_absolute = path[0] == FORWARD_SLASH
        trailing_separator = path[-1] == FORWARD_SLASH

        path = normalize_string(
            path, not is_absolute, FORWARD_SLASH, is_posix_path_separator
        )

        if not path:
            if is_absolute:
                return "/"
            return "./" if trailing_separator else "."
        if trailing_separator:
            path += "/"

        return f"/{path}" if is_absolute else path

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` when *path* starts with ``/``."""
        validate_string(path, "path")
        return path.startswith(FORWARD_SLASH)

    def join(self, *paths: str) -> str:
        """Join the non-empty *paths* with ``/`` and normalise the result."""
        for path in paths:
            validate_string(path, "path")
        joined = FORWARD_SLASH.join(path for path in paths if path)
        if not joined:
            return "."
        return self.normalize(joined)

    def relative(self, from_: str, to: str) -> str:
        """
        Return the path leading from *from_* to *to*.

        Both arguments are resolved first. The common prefix is matched on
        whole segments, so ``/foo/bar`` and ``/foo/barbaz`` share only ``/foo``.
        """
        validate_string(from_, "from")
        validate_string(to, "to")

        if from_ == to:
            return ""

        from_ = self.resolve(from_)
        to = self.resolve(to)

        if from_ == to:
            return ""

        from_start = 1
        from_end = len(from_)
        from_len = from_end - from_start
        to_start = 1
        to_len = len(to) - to_start

        length = min(from_len, to_len)
        last_common_sep = -1
        i = 0
        while i < length:
            from_char = from_[from_start + i]
            if from_char != to[to_start + i]:
                break
            if from_char == FORWARD_SLASH:
                last_common_sep = i
            i += 1

        if i == length:
            if to_len > length:
                if to[to_start + i] == FORWARD_SLASH:
                    # ``from_`` is the exact base path of ``to``:
                    # from='/foo/bar'; to='/foo/bar/baz'
                    return to[to_start + i + 1 :]
                if i == 0:
                    # ``from_`` is the root: from='/'; to='/foo'
                    return to[to_start + i :]
            elif from_len > length:
                if from_[from_start + i] == FORWARD_SLASH:
                    # ``to`` is the exact base path of ``from_``:
                    # from='/foo/bar/baz'; to='/foo/bar'
                    last_common_sep = i
                elif i == 0:
                    # ``to`` is the root: from='/foo/bar'; to='/'
                    last_common_sep = 0

        out = "/".join(
            ".."
            for j in range(from_start + last_common_sep + 1, from_end + 1)
            if j == from_end or from_[j] == FORWARD_SLASH
        )
        return f"{out}{to[to_start + last_common_sep :]}"

    def to_namespaced_path(self, path: str) -> str:
        """Return *path* unchanged; POSIX has no namespaced form."""
        return path

    def dirname(self, path: str) -> str:
        """Return *path* without its last segment."""
        validate_string(path, "path")
        if not path:
            return "."
        has_root = path[0] == FORWARD_SLASH
        end = -1
        matched_slash = True
        for i in range(len(path) - 1, 0, -1):
            if path[i] == FORWARD_SLASH:
                if not matched_slash:
                    end = i
                    break
            else:
                matched_slash = False

        if end == -1:
            return "/" if has_root else "."
        if has_root and end == 1:
            return "//"
        return path[:end]

    def parse(self, path: str) -> ParsedPath:
        """Split *path* into its root, directory, base, name and extension."""
        validate_string(path, "path")
        if not path:
            return ParsedPath()

        is_absolute = path[0] == FORWARD_SLASH
        root = FORWARD_SLASH if is_absolute else ""
        start = len(root)
        start_part, base, name, ext = self._parse_tail(path, start)

        directory = path[: start_part - 1] if start_part > start else root
        return ParsedPath(root=root, dir=directory, base=base, ext=ext, name=name)


posix: t.Final[PosixDialect] = PosixDialect()


__all__ = ["PosixDialect", "posix"]

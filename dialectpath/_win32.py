"""Windows path dialect: drive letters, UNC roots and ``\\`` separators.

Both ``\\`` and ``/`` are accepted as separators on input; output always
uses ``\\``. Comparisons in :meth:`Win32Dialect.relative` and device matching
in :meth:`Win32Dialect.resolve` are case-insensitive.
"""

from __future__ import annotations

import logging
import typing as t

from ._chars import (
    BACKWARD_SLASH,
    COLON,
    DOT,
    FORWARD_SLASH,
    QUESTION_MARK,
    char_at,
    has_drive_prefix,
    is_path_separator,
    is_windows_device_root,
)
from ._format import ParsedPath
from ._normalize import normalize_string
from ._validators import validate_string
from .dialect import BaseDialect

logger = logging.getLogger(__name__)


class _UncRoot(t.NamedTuple):
    server: str
    share: str
    end: int

    @property
    def device(self) -> str:
        return f"\\\\{self.server}\\{self.share}"


class _Root(t.NamedTuple):
    device: str
    end: int
    is_absolute: bool
    is_unc: bool = False


def _match_unc(path: str) -> _UncRoot | None:
    """
    Match a complete ``\\\\server\\share`` root at the start of *path*.

    *path* must already be known to start with two separators. ``end`` is the
    index just past the share name. Returns ``None`` when the server or share
    component is missing.
    """
    length = len(path)
    j = 2
    last = j
    while j < length and not is_path_separator(path[j]):
        j += 1
    if j >= length or j == last:
        return None
    server = path[last:j]
    last = j
    while j < length and is_path_separator(path[j]):
        j += 1
    if j >= length:
        return None
    last = j
    while j < length and not is_path_separator(path[j]):
        j += 1
    return _UncRoot(server, path[last:j], j)


def _match_root(path: str) -> _Root:
    """Detect the device and root of *path*, in UNC, separator, drive order."""
    first = char_at(path, 0)
    if is_path_separator(first):
        if not is_path_separator(char_at(path, 1)):
            return _Root("", 1, True)
        unc = _match_unc(path)
        if unc is None:
            # ``\\server`` alone is just an absolute path with a messy root.
            return _Root("", 0, True)
        return _Root(unc.device, unc.end, True, is_unc=True)
    if has_drive_prefix(path):
        if is_path_separator(char_at(path, 2)):
            return _Root(path[:2], 3, True)
        return _Root(path[:2], 2, False)
    return _Root("", 0, False)


def _trim_backslashes(path: str) -> tuple[int, int]:
    """Return the bounds of *path* without leading and trailing backslashes."""
    start = 0
    while start < len(path) and path[start] == BACKWARD_SLASH:
        start += 1
    end = len(path)
    while end - 1 > start and path[end - 1] == BACKWARD_SLASH:
        end -= 1
    return start, end


class Win32Dialect(BaseDialect):
    """Path operations for Windows paths."""

    name: t.ClassVar[str] = "win32"
    sep: t.ClassVar[str] = BACKWARD_SLASH
    delimiter: t.ClassVar[str] = ";"

    __slots__ = ()

    def _is_separator(self, char: str) -> bool:
        return is_path_separator(char)

    def _component_start(self, path: str) -> int:
        # Skip ``C:`` so the colon is never read as part of a file name.
        return 2 if has_drive_prefix(path) else 0

    def _drive_cwd(self, device: str) -> str:
        """Return the working directory for *device*, or its root."""
        path = self._env.drive_cwd(device) or self._env.cwd()
        if path is None or (
            path[:2].lower() != device.lower() and char_at(path, 2) == BACKWARD_SLASH
        ):
            logger.debug("No working directory known for %s; using its root", device)
            return f"{device}\\"
        return path

    def resolve(self, *paths: str) -> str:
        """
        Resolve *paths* into an absolute path.

        Arguments are processed right to left. Arguments that name another
        device than the one already found are skipped, and processing stops
        once both a device and an absolute path are known. When arguments run
        out the process cwd is used, or the drive's own working directory if
        only the device is known.
        """
        resolved_device = ""
        resolved_tail = ""
        resolved_absolute = False

        for i in range(len(paths) - 1, -2, -1):
            if i >= 0:
                path = paths[i]
                validate_string(path, f"paths[{i}]")
                if not path:
                    continue
            elif not resolved_device:
                path = self._env.cwd()
                validate_string(path, "cwd")
                logger.debug("Resolving %r against cwd %r", resolved_tail, path)
            else:
                # UNC devices are always absolute, so this is a drive letter.
                path = self._drive_cwd(resolved_device)
                validate_string(path, "cwd")

            root = _match_root(path)

            if root.device:
                if resolved_device:
                    if root.device.lower() != resolved_device.lower():
                        continue
                else:
                    resolved_device = root.device

            if resolved_absolute:
                if resolved_device:
                    break
            else:
                resolved_tail = f"{path[root.end:]}\\{resolved_tail}"
                resolved_absolute = root.is_absolute
                if root.is_absolute and resolved_device:
                    break

        resolved_tail = normalize_string(
            resolved_tail, not resolved_absolute, BACKWARD_SLASH, is_path_separator
        )

        if resolved_absolute:
            return f"{resolved_device}\\{resolved_tail}"
        return f"{resolved_device}{resolved_tail}" or "."

    def normalize(self, path: str) -> str:
        """
        Normalise *path*, keeping its root and a trailing separator.

        A relative result that would start with ``X:`` is prefixed with
        ``.\\`` so it is not read back as a drive-relative path.
        """
        validate_string(path, "path")
        length = len(path)
        if length == 0:
            return "."
        if length == 1:
            return BACKWARD_SLASH if path == FORWARD_SLASH else path

        root = _match_root(path)
        if root.is_unc and root.end == length:
            # Nothing but the UNC root.
            return f"{root.device}\\"

        tail = ""
        if root.end < length:
            tail = normalize_string(
                path[root.end :],
                not root.is_absolute,
                BACKWARD_SLASH,
                is_path_separator,
            )
        if not tail and not root.is_absolute:
            tail = "."
        if tail and is_path_separator(path[-1]):
            tail += BACKWARD_SLASH
        if not root.device and not root.is_absolute and has_drive_prefix(tail):
            # A file named ``C:`` must not turn into the cwd of drive C.
            tail = f".\\{tail}"
        if root.is_absolute:
            return f"{root.device}\\{tail}"
        return f"{root.device}{tail}"

    def is_absolute(self, path: str) -> bool:
        """Return ``True`` for ``\\foo``, ``\\\\server\\share`` and ``C:\\foo``."""
        validate_string(path, "path")
        if not path:
            return False
        return is_path_separator(path[0]) or (
            len(path) > 2 and has_drive_prefix(path) and is_path_separator(path[2])
        )

    def join(self, *paths: str) -> str:
        """
        Join the non-empty *paths* with ``\\`` and normalise the result.

        A leading run of separators is collapsed so the result is not taken
        for a UNC path, unless the first argument starts with exactly two
        separators and a server name. ``join('//server', 'share')`` therefore
        yields ``\\\\server\\share\\``.
        """
        for path in paths:
            validate_string(path, "path")
        parts = [path for path in paths if path]
        if not parts:
            return "."

        joined = BACKWARD_SLASH.join(parts)
        first = parts[0]

        needs_replace = True
        slash_count = 0
        if is_path_separator(first[0]):
            slash_count += 1
            if is_path_separator(char_at(first, 1)):
                slash_count += 1
                if len(first) > 2:
                    if is_path_separator(first[2]):
                        slash_count += 1
                    else:
                        needs_replace = False
        if needs_replace:
            while slash_count < len(joined) and is_path_separator(joined[slash_count]):
                slash_count += 1
            if slash_count >= 2:
                joined = f"\\{joined[slash_count:]}"

        return self.normalize(joined)

    def relative(self, from_: str, to: str) -> str:
        """
        Return the path leading from *from_* to *to*.

        Both arguments are resolved and compared case-insensitively, while the
        result keeps the casing of the resolved *to*. Paths on different
        devices have no relative form, so the resolved *to* is returned.
        """
        validate_string(from_, "from")
        validate_string(to, "to")

        if from_ == to:
            return ""

        from_orig = self.resolve(from_)
        to_orig = self.resolve(to)

        if from_orig == to_orig:
            return ""

        from_ = from_orig.lower()
        to = to_orig.lower()

        if from_ == to:
            return ""

        from_start, from_end = _trim_backslashes(from_)
        from_len = from_end - from_start
        to_start, to_end = _trim_backslashes(to)
        to_len = to_end - to_start

        length = min(from_len, to_len)
        last_common_sep = -1
        i = 0
        while i < length:
            from_char = from_[from_start + i]
            if from_char != to[to_start + i]:
                break
            if from_char == BACKWARD_SLASH:
                last_common_sep = i
            i += 1

        if i != length:
            # Mismatch before any common separator: different roots.
            if last_common_sep == -1:
                return to_orig
        else:
            if to_len > length:
                if to[to_start + i] == BACKWARD_SLASH:
                    # from='C:\\foo\\bar'; to='C:\\foo\\bar\\baz'
                    return to_orig[to_start + i + 1 :]
                if i == 2:
                    # ``from_`` is the device root: from='C:\\'; to='C:\\foo'
                    return to_orig[to_start + i :]
            if from_len > length:
                if from_[from_start + i] == BACKWARD_SLASH:
                    # from='C:\\foo\\bar'; to='C:\\foo'
                    last_common_sep = i
                elif i == 2:
                    # ``to`` is the device root: from='C:\\foo\\bar'; to='C:\\'
                    last_common_sep = 3
            if last_common_sep == -1:
                last_common_sep = 0

        out = BACKWARD_SLASH.join(
            ".."
            for j in range(from_start + last_common_sep + 1, from_end + 1)
            if j == from_end or from_[j] == BACKWARD_SLASH
        )

        to_start += last_common_sep

        if out:
            return f"{out}{to_orig[to_start:to_end]}"

        if char_at(to_orig, to_start) == BACKWARD_SLASH:
            to_start += 1
        return to_orig[to_start:to_end]

    def to_namespaced_path(self, path: str) -> str:
        """
        Return the ``\\\\?\\`` long-path form of *path*.

        ``\\\\server\\share\\x`` becomes ``\\\\?\\UNC\\server\\share\\x`` and
        ``C:\\x`` becomes ``\\\\?\\C:\\x``. Anything else, including paths
        already in device or long form, non-string and empty values, is
        returned unchanged.
        """
        if not isinstance(path, str) or not path:
            return path

        resolved = self.resolve(path)

        if len(resolved) <= 2:
            return path

        if resolved[0] == BACKWARD_SLASH:
            if resolved[1] == BACKWARD_SLASH and resolved[2] not in (
                QUESTION_MARK,
                DOT,
            ):
                return f"\\\\?\\UNC\\{resolved[2:]}"
        elif (
            is_windows_device_root(resolved[0])
            and resolved[1] == COLON
            and resolved[2] == BACKWARD_SLASH
        ):
            return f"\\\\?\\{resolved}"

        return path

    def dirname(self, path: str) -> str:
        """Return *path* without its last segment, never cutting into the root."""
        validate_string(path, "path")
        length = len(path)
        if length == 0:
            return "."
        if length == 1:
            return path if is_path_separator(path) else "."

        root_end = -1
        offset = 0
        first = path[0]

        if is_path_separator(first):
            root_end = offset = 1
            if is_path_separator(path[1]):
                unc = _match_unc(path)
                if unc is not None:
                    if unc.end == length:
                        return path
                    # Treat the separator after the share as part of the root.
                    root_end = offset = unc.end + 1
        elif has_drive_prefix(path):
            root_end = offset = (
                3 if length > 2 and is_path_separator(path[2]) else 2
            )

        end = -1
        matched_slash = True
        for i in range(length - 1, offset - 1, -1):
            if is_path_separator(path[i]):
                if not matched_slash:
                    end = i
                    break
            else:
                matched_slash = False

        if end == -1:
            if root_end == -1:
                return "."
            end = root_end
        return path[:end]

    def parse(self, path: str) -> ParsedPath:
        """Split *path* into its root, directory, base, name and extension."""
        validate_string(path, "path")
        if not path:
            return ParsedPath()

        length = len(path)
        first = path[0]

        if length == 1:
            if is_path_separator(first):
                return ParsedPath(root=path, dir=path)
            return ParsedPath(base=path, name=path)

        root_end = 0
        if is_path_separator(first):
            root_end = 1
            if is_path_separator(path[1]):
                unc = _match_unc(path)
                if unc is not None:
                    root_end = unc.end if unc.end == length else unc.end + 1
        elif has_drive_prefix(path):
            # ``C:`` and ``C:\`` are nothing but a root.
            if length == 2 or (length == 3 and is_path_separator(path[2])):
                return ParsedPath(root=path, dir=path)
            root_end = 3 if is_path_separator(path[2]) else 2

        root = path[:root_end]
        start_part, base, name, ext = self._parse_tail(path, root_end)

        if start_part > 0 and start_part != root_end:
            directory = path[: start_part - 1]
        else:
            directory = root
        return ParsedPath(root=root, dir=directory, base=base, ext=ext, name=name)


win32: t.Final[Win32Dialect] = Win32Dialect()


__all__ = ["Win32Dialect", "win32"]

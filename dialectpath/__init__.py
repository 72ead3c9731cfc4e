r"""Pure POSIX and Windows path manipulation, independent of the host OS.

``posix`` and ``win32`` are always available. ``path`` is the dialect that
matches the host, chosen once at import time (see
:data:`dialectpath.platform.PLATFORM_OVERRIDE_ENV`), and the module-level
functions below are bound to it::

    from dialectpath import join, win32

    join("/foo", "bar")                  # host dialect
    win32.relative("C:\\a\\b", "C:\\c")  # always Windows rules
"""

from __future__ import annotations

import typing as t

from ._format import ParsedPath
from ._posix import PosixDialect, posix
from ._win32 import Win32Dialect, win32
from .dialect import BaseDialect, PathDialect
from .environment import (
    DEFAULT_ENVIRONMENT,
    PathEnvironment,
    env_drive_cwd,
    no_drive_cwd,
    process_cwd,
)
from .errors import (
    DialectPathError,
    InvalidArgumentShapeError,
    InvalidArgumentTypeError,
)
from .platform import PLATFORM_OVERRIDE_ENV, dialect_name, is_windows, select_dialect

path: t.Final[PathDialect] = select_dialect()

resolve = path.resolve
normalize = path.normalize
is_absolute = path.is_absolute
join = path.join
relative = path.relative
to_namespaced_path = path.to_namespaced_path
dirname = path.dirname
basename = path.basename
extname = path.extname
format = path.format  # noqa: A001 - mirrors the dialect operation name
parse = path.parse
sep: t.Final[str] = path.sep
delimiter: t.Final[str] = path.delimiter

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "PLATFORM_OVERRIDE_ENV",
    "BaseDialect",
    "DialectPathError",
    "InvalidArgumentShapeError",
    "InvalidArgumentTypeError",
    "ParsedPath",
    "PathDialect",
    "PathEnvironment",
    "PosixDialect",
    "Win32Dialect",
    "basename",
    "delimiter",
    "dialect_name",
    "dirname",
    "env_drive_cwd",
    "extname",
    "format",
    "is_absolute",
    "is_windows",
    "join",
    "no_drive_cwd",
    "normalize",
    "parse",
    "path",
    "posix",
    "process_cwd",
    "relative",
    "resolve",
    "select_dialect",
    "sep",
    "to_namespaced_path",
    "win32",
]

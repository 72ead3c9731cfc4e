"""Parsed path components and the formatter that reassembles them."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as t

from ._chars import DOT
from ._validators import validate_object

_FIELDS: t.Final[tuple[str, ...]] = ("root", "dir", "base", "ext", "name")


@dc.dataclass(frozen=True, slots=True)
class ParsedPath(cabc.Mapping):
    """
    Components of a single path as produced by ``parse``.

    ``base`` is always ``name + ext``. ``dir`` equals ``root`` when the
    directory portion is the root itself and otherwise has no trailing
    separator. Instances behave as read-only mappings so they can be handed
    straight back to ``format``.
    """

    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def __getitem__(self, key: str) -> str:
        """Return the component called *key*."""
        if key not in _FIELDS:
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> t.Iterator[str]:
        """Iterate over component names in a stable order."""
        return iter(_FIELDS)

    def __len__(self) -> int:
        """Return the number of components."""
        return len(_FIELDS)

    def as_dict(self) -> dict[str, str]:
        """Return the components as a plain ``dict``."""
        return dict(self)


def _component(components: cabc.Mapping[str, t.Any], key: str) -> str:
    return components.get(key) or ""


def _format_ext(ext: str) -> str:
    if not ext:
        return ""
    return ext if ext.startswith(DOT) else f"{DOT}{ext}"


def format_path(sep: str, components: cabc.Mapping[str, t.Any]) -> str:
    """
    Build a path string from ``root``/``dir``/``base``/``name``/``ext``.

    ``dir`` wins over ``root`` and ``base`` wins over ``name`` + ``ext``. No
    separator is inserted when the directory is the root itself.
    """
    validate_object(components, "pathObject")
    root = _component(components, "root")
    directory = _component(components, "dir") or root
    base = _component(components, "base") or (
        f"{_component(components, 'name')}{_format_ext(_component(components, 'ext'))}"
    )
    if not directory:
        return base
    if directory == root:
        return f"{directory}{base}"
    return f"{directory}{sep}{base}"


__all__ = ["ParsedPath", "format_path"]

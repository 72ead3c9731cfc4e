"""Dot-segment collapsing shared by both path dialects."""

from __future__ import annotations

import typing as t

from ._chars import DOT, FORWARD_SLASH


def _pop_segment(res: str, separator: str) -> tuple[str, int]:
    """Drop the last segment of *res*, returning the new text and its tail length."""
    index = res.rfind(separator)
    if index == -1:
        return "", 0
    res = res[:index]
    return res, len(res) - 1 - res.rfind(separator)


def normalize_string(
    path: str,
    allow_above_root: bool,  # noqa: FBT001 - mirrors the call sites
    separator: str,
    is_separator: t.Callable[[str], bool],
) -> str:
    """
    Resolve ``.`` and ``..`` segments and collapse repeated separators.

    The scan walks *path* left to right and runs one step past the end with
    an implicit separator so the final segment is flushed. A ``..`` with no
    real segment to remove is kept literally only when *allow_above_root* is
    true. Leading and trailing separators are not preserved; callers restore
    them.

    Parameters
    ----------
    path : str
        The path tail to normalise (without its root).
    allow_above_root : bool
        Whether unmatched ``..`` segments survive in the output.
    separator : str
        The separator written between output segments.
    is_separator : Callable[[str], bool]
        Predicate recognising separators in *path*.

    Returns
    -------
    str
        The normalised tail, possibly empty.
    """
    res = ""
    last_segment_length = 0
    last_slash = -1
    dots = 0
    char = ""
    for i in range(len(path) + 1):
        if i < len(path):
            char = path[i]
        elif is_separator(char):
            break
        else:
            char = FORWARD_SLASH

        if is_separator(char):
            if last_slash == i - 1 or dots == 1:
                pass
            elif dots == 2:
                if res and (last_segment_length != 2 or not res.endswith("..")):
                    res, last_segment_length = _pop_segment(res, separator)
                elif allow_above_root:
                    res = f"{res}{separator}.." if res else ".."
                    last_segment_length = 2
            else:
                segment = path[last_slash + 1 : i]
                res = f"{res}{separator}{segment}" if res else segment
                last_segment_length = i - last_slash - 1
            last_slash = i
            dots = 0
        elif char == DOT and dots != -1:
            dots += 1
        else:
            dots = -1
    return res


__all__ = ["normalize_string"]

"""Unit tests for argument validation and the error hierarchy."""

from __future__ import annotations

import pytest

from dialectpath import (
    DialectPathError,
    InvalidArgumentTypeError,
    posix,
    win32,
)
from dialectpath._validators import validate_object, validate_string


def test_validate_string_accepts_strings() -> None:
    """Strings, including the empty string, pass validation."""
    validate_string("", "path")
    validate_string("a", "path")


def test_validate_string_reports_argument_name() -> None:
    """The error names the offending argument and keeps the value."""
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        validate_string(b"/tmp", "path")

    err = excinfo.value
    assert err.name == "path"
    assert err.actual == b"/tmp"
    assert str(err) == (
        "The \"path\" argument must be of type str. Received type bytes (b'/tmp')"
    )


def test_long_values_are_truncated_in_message() -> None:
    """Very long reprs are shortened so messages stay readable."""
    with pytest.raises(InvalidArgumentTypeError, match=r"Received type list \(\[0, 1"):
        validate_string(list(range(50)), "path")


def test_none_is_described_plainly() -> None:
    """``None`` is reported without type decoration."""
    with pytest.raises(InvalidArgumentTypeError, match=r"Received None$"):
        validate_string(None, "to")


def test_errors_share_base_class() -> None:
    """Both error kinds derive from the package base and ``TypeError``."""
    assert issubclass(InvalidArgumentTypeError, DialectPathError)
    assert issubclass(InvalidArgumentTypeError, TypeError)


def test_validate_object_accepts_mappings() -> None:
    """Dicts pass shape validation."""
    validate_object({"dir": "x"}, "pathObject")


@pytest.mark.parametrize(
    ("call", "name"),
    [
        (lambda: posix.resolve("a", 1), "paths[1]"),
        (lambda: win32.resolve(None), "paths[0]"),
        (lambda: posix.join("a", None), "path"),
        (lambda: win32.join(3), "path"),
        (lambda: posix.relative(1, "a"), "from"),
        (lambda: win32.relative("a", 1), "to"),
        (lambda: posix.normalize(1), "path"),
        (lambda: win32.is_absolute(1), "path"),
        (lambda: posix.dirname(1), "path"),
        (lambda: win32.basename("a", 1), "suffix"),
        (lambda: posix.extname(1), "path"),
        (lambda: win32.parse(1), "path"),
    ],
)
def test_operations_reject_non_strings(call: object, name: str) -> None:
    """Every string argument is validated before any work is done."""
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        call()  # type: ignore[operator]

    assert excinfo.value.name == name

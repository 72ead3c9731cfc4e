"""Unit tests for the shared dialect base class."""

from __future__ import annotations

import typing as t

import pytest

from dialectpath import BaseDialect, PathEnvironment


def test_base_dialect_cannot_be_instantiated() -> None:
    """The base class leaves separator detection to concrete dialects."""
    with pytest.raises(TypeError, match="_is_separator"):
        BaseDialect()  # type: ignore[abstract]


def test_incomplete_subclass_fails_on_creation() -> None:
    """A dialect that forgets ``_is_separator`` cannot be created at all."""

    class NoSeparatorDialect(BaseDialect):
        name: t.ClassVar[str] = "nosep"
        sep: t.ClassVar[str] = "|"
        delimiter: t.ClassVar[str] = ","

    with pytest.raises(TypeError, match="_is_separator"):
        NoSeparatorDialect()  # type: ignore[abstract]


def test_complete_subclass_uses_shared_operations() -> None:
    """Implementing ``_is_separator`` is enough to get the shared scans."""

    class PipeDialect(BaseDialect):
        name: t.ClassVar[str] = "pipe"
        sep: t.ClassVar[str] = "|"
        delimiter: t.ClassVar[str] = ","

        def _is_separator(self, char: str) -> bool:
            return char == "|"

    dialect = PipeDialect(env=PathEnvironment(cwd=lambda: "|"))

    assert dialect.basename("a|b|c.txt|") == "c.txt"
    assert dialect.extname("a|b|c.txt") == ".txt"
    assert dialect.with_environment(dialect.env) is not dialect
    assert repr(dialect) == "PipeDialect(name='pipe')"

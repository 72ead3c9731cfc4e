"""Unit tests for host detection and dialect selection."""

from __future__ import annotations

import importlib
import logging
import typing as t

import pytest

import dialectpath
import dialectpath.platform as platform
from dialectpath import posix, win32


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("win32", True),
        ("Windows", True),
        (" NT ", True),
        ("linux", False),
        ("darwin", False),
        ("emscripten", False),
    ],
)
def test_is_windows_classifies_platform_names(
    name: str,
    expected: bool,  # noqa: FBT001
) -> None:
    """Only ``win``/``nt`` prefixes count as Windows-like hosts."""
    assert platform.is_windows(name) is expected


def test_override_env_forces_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests can force a Windows host via the override environment variable."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")

    assert platform.is_windows() is True
    assert platform.select_dialect() is win32


def test_override_env_forces_posix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Overrides work in the other direction as well."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "linux")

    assert platform.is_windows() is False
    assert platform.select_dialect() is posix


def test_host_platform_is_used_without_override(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """``sys.platform`` decides when nothing overrides it."""
    monkeypatch.setattr(platform.sys, "platform", "win32")
    assert platform.is_windows() is True

    monkeypatch.setattr(platform.sys, "platform", "linux")
    assert platform.is_windows() is False


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        ("posix", "posix"),
        ("POSIX", "posix"),
        ("win32", "win32"),
        ("windows", "win32"),
        ("nt", "win32"),
        ("linux", "posix"),
        ("cygwin", "posix"),
    ],
)
def test_dialect_name_maps_aliases(requested: str, expected: str) -> None:
    """Explicit dialect names win; other values are read as platform names."""
    assert platform.dialect_name(requested) == expected


def test_select_dialect_explicit_ignores_override(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An explicit dialect is deterministic regardless of the host."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")

    assert platform.select_dialect("posix") is posix


def test_select_dialect_logs_choice(caplog: pytest.LogCaptureFixture) -> None:
    """Dialect selection leaves a debug breadcrumb."""
    with caplog.at_level(logging.DEBUG, logger="dialectpath.platform"):
        platform.select_dialect("win32")

    assert "Selected win32 path dialect" in caplog.text


def test_dialects_reference_each_other() -> None:
    """Each dialect exposes itself and its counterpart by name."""
    assert posix.posix is posix
    assert posix.win32 is win32
    assert win32.win32 is win32
    assert win32.posix is posix
    assert win32.posix.win32 is win32


def test_injected_dialect_keeps_self_reference() -> None:
    """A dialect with its own environment still points at itself."""
    custom = posix.with_environment(dialectpath.PathEnvironment(cwd=lambda: "/x"))

    assert custom.posix is custom
    assert custom.win32 is win32
    assert repr(custom) == "PosixDialect(name='posix')"


@pytest.fixture
def reload_package(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Iterator[t.Callable[[], t.Any]]:
    """Reload ``dialectpath`` on demand and restore the host binding afterwards."""
    yield lambda: importlib.reload(dialectpath)
    monkeypatch.delenv(platform.PLATFORM_OVERRIDE_ENV, raising=False)
    importlib.reload(dialectpath)


def test_default_exports_follow_host(
    monkeypatch: pytest.MonkeyPatch, reload_package: t.Callable[[], t.Any]
) -> None:
    """Module-level operations are bound to the dialect chosen at import."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
    module = reload_package()

    assert module.path is win32
    assert module.sep == "\\"
    assert module.delimiter == ";"
    assert module.join("a", "b") == "a\\b"
    assert module.posix is posix

    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "linux")
    module = reload_package()

    assert module.path is posix
    assert module.sep == "/"
    assert module.join("a", "b") == "a/b"
    assert module.is_absolute("/x") is True

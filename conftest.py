"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from dialectpath import PathEnvironment, PosixDialect, Win32Dialect, posix, win32
from dialectpath.platform import PLATFORM_OVERRIDE_ENV

POSIX_CWD: t.Final[str] = "/home/user/project"
WIN32_CWD: t.Final[str] = "C:\\Users\\user\\project"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "host_dependent: mark test as relying on the real host working directory",
    )


@pytest.fixture(autouse=True)
def clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's platform override from leaking into tests."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)


@pytest.fixture
def posix_at_cwd() -> PosixDialect:
    """Return a POSIX dialect whose working directory is :data:`POSIX_CWD`."""
    return posix.with_environment(
        PathEnvironment(cwd=lambda: POSIX_CWD, host_is_windows=False)
    )


@pytest.fixture
def win32_at_cwd() -> Win32Dialect:
    """Return a Windows dialect whose working directory is :data:`WIN32_CWD`."""
    return win32.with_environment(
        PathEnvironment(cwd=lambda: WIN32_CWD, host_is_windows=True)
    )

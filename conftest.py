"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from slash_formatter.platform import (
    BACKSLASH,
    BUILD_PLATFORM_ENV,
    HOST_PLATFORM_ENV,
    SLASH,
)


@pytest.fixture(params=[SLASH, BACKSLASH], ids=["slash", "backslash"])
def separator(request: pytest.FixtureRequest) -> str:
    """Provide each separator the facades support."""
    return t.cast("str", request.param)


@pytest.fixture
def no_platform_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove host and build platform overrides for the current test."""
    monkeypatch.delenv(HOST_PLATFORM_ENV, raising=False)
    monkeypatch.delenv(BUILD_PLATFORM_ENV, raising=False)

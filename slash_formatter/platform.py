"""Platform helpers that decide which separator each facade encodes.

Centralising the logic keeps the platform-to-separator matrix in one place.
Facades call these helpers once at import time and bind the result; nothing
here runs on the per-call path.
"""

from __future__ import annotations

import logging
import os
import sys
import sysconfig
import typing as t

logger = logging.getLogger(__name__)

SLASH: t.Final[str] = "/"
BACKSLASH: t.Final[str] = "\\"

# Tests and cross-built interpreters set these to emulate another platform
# without needing to run on it.
HOST_PLATFORM_ENV: t.Final[str] = "SLASH_FORMATTER_HOST_PLATFORM"
BUILD_PLATFORM_ENV: t.Final[str] = "SLASH_FORMATTER_BUILD_PLATFORM"

# Platform names (as reported by ``sys.platform`` or
# ``sysconfig.get_platform()``) that use a backslash. Entries ending in ``*``
# match by prefix, so ``"win*"`` covers both ``"win32"`` and ``"win-amd64"``.
# Every other platform uses a forward slash.
_BACKSLASH_PLATFORMS: t.Final[tuple[str, ...]] = ("win*", "nt")


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _resolve(platform: str | None, env_var: str, default: t.Callable[[], str]) -> str:
    if platform:
        return _normalise(platform)

    if override := os.getenv(env_var):
        logger.debug("Using %s=%r as platform override", env_var, override)
        return _normalise(override)

    return _normalise(default())


def host_platform(platform: str | None = None) -> str:
    """Return the platform the interpreter is running on, honouring overrides."""
    return _resolve(platform, HOST_PLATFORM_ENV, lambda: sys.platform)


def build_platform(platform: str | None = None) -> str:
    """Return the platform the interpreter was built for, honouring overrides."""
    return _resolve(platform, BUILD_PLATFORM_ENV, sysconfig.get_platform)


def separator_for_platform(platform: str) -> str:
    """Return the canonical separator character used by *platform*."""
    name = _normalise(platform)
    for pattern in _BACKSLASH_PLATFORMS:
        if pattern.endswith("*"):
            if name.startswith(pattern[:-1]):
                return BACKSLASH
        elif name == pattern:
            return BACKSLASH
    return SLASH


def host_separator(platform: str | None = None) -> str:
    """Return the separator of the host platform (default: current)."""
    return separator_for_platform(host_platform(platform))


def build_separator(platform: str | None = None) -> str:
    """Return the separator of the build platform (default: current)."""
    return separator_for_platform(build_platform(platform))


__all__ = [
    "BACKSLASH",
    "BUILD_PLATFORM_ENV",
    "HOST_PLATFORM_ENV",
    "SLASH",
    "build_platform",
    "build_separator",
    "host_platform",
    "host_separator",
    "separator_for_platform",
]

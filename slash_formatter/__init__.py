"""Trim, pad and join path strings on slashes and backslashes.

The core :class:`SeparatorNormalizer` works with any single separator
character. The facade modules bind it to a fixed choice:

- :mod:`slash_formatter.slash`: always ``/``
- :mod:`slash_formatter.backslash`: always ``\\``
- :mod:`slash_formatter.file_separator`: the running platform's separator
- :mod:`slash_formatter.file_separator_build`: the build platform's separator

Every facade function is re-exported here.
"""

from __future__ import annotations

from . import backslash, file_separator, file_separator_build, slash
from .backslash import *  # noqa: F403
from .buffer import PathBuffer
from .errors import InvalidSeparatorError, LiteralValueError, SlashFormatterError
from .file_separator import *  # noqa: F403
from .file_separator_build import *  # noqa: F403
from .literals import render_literal
from .normalizer import SeparatorNormalizer
from .platform import (
    BUILD_PLATFORM_ENV,
    HOST_PLATFORM_ENV,
    build_separator,
    host_separator,
    separator_for_platform,
)
from .slash import *  # noqa: F403

__all__ = [
    "BUILD_PLATFORM_ENV",
    "HOST_PLATFORM_ENV",
    "InvalidSeparatorError",
    "LiteralValueError",
    "PathBuffer",
    "SeparatorNormalizer",
    "SlashFormatterError",
    "build_separator",
    "host_separator",
    "render_literal",
    "separator_for_platform",
    *backslash.__all__,
    *file_separator.__all__,
    *file_separator_build.__all__,
    *slash.__all__,
]

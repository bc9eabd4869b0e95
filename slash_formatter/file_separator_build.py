"""Path helpers using the separator of the platform the interpreter was built for.

This differs from :mod:`slash_formatter.file_separator` only for cross-built
interpreters, or when ``SLASH_FORMATTER_BUILD_PLATFORM`` is set. Use it for
paths that must follow the conventions of the build machine rather than those
of the machine running the code.
"""

from __future__ import annotations

import logging
import typing as t

from .file_separator import FILE_SEPARATOR
from .normalizer import SeparatorNormalizer
from .platform import build_platform, separator_for_platform

logger = logging.getLogger(__name__)

FILE_SEPARATOR_BUILD: t.Final[str] = separator_for_platform(build_platform())

logger.debug("Build file separator resolved to %r", FILE_SEPARATOR_BUILD)

_NORMALIZER: t.Final[SeparatorNormalizer] = SeparatorNormalizer(FILE_SEPARATOR_BUILD)

# Host separator while assertions are enabled, build separator under ``-O``.
_DEBUG_RELEASE_NORMALIZER: t.Final[SeparatorNormalizer] = SeparatorNormalizer(
    FILE_SEPARATOR if __debug__ else FILE_SEPARATOR_BUILD
)

delete_end_file_separator_build = _NORMALIZER.delete_end
delete_end_file_separator_build_owned = _NORMALIZER.delete_end_owned
delete_end_file_separator_build_in_place = _NORMALIZER.delete_end_in_place

delete_start_file_separator_build = _NORMALIZER.delete_start
delete_start_file_separator_build_owned = _NORMALIZER.delete_start_owned
delete_start_file_separator_build_in_place = _NORMALIZER.delete_start_in_place

add_end_file_separator_build = _NORMALIZER.add_end
add_end_file_separator_build_owned = _NORMALIZER.add_end_owned
add_end_file_separator_build_in_place = _NORMALIZER.add_end_in_place

add_start_file_separator_build = _NORMALIZER.add_start
add_start_file_separator_build_owned = _NORMALIZER.add_start_owned
add_start_file_separator_build_in_place = _NORMALIZER.add_start_in_place

concat_with_file_separator_build = _NORMALIZER.concat
concat_with_file_separator_build_owned = _NORMALIZER.concat_owned
concat_with_file_separator_build_in_place = _NORMALIZER.concat_in_place

join_with_file_separator_build = _NORMALIZER.join
join_with_file_separator_build_in_place = _NORMALIZER.join_in_place

concat_literals_with_file_separator_build = _NORMALIZER.concat_literals
concat_literals_with_file_separator_debug_release = (
    _DEBUG_RELEASE_NORMALIZER.concat_literals
)

__all__ = [
    "FILE_SEPARATOR_BUILD",
    "add_end_file_separator_build",
    "add_end_file_separator_build_in_place",
    "add_end_file_separator_build_owned",
    "add_start_file_separator_build",
    "add_start_file_separator_build_in_place",
    "add_start_file_separator_build_owned",
    "concat_literals_with_file_separator_build",
    "concat_literals_with_file_separator_debug_release",
    "concat_with_file_separator_build",
    "concat_with_file_separator_build_in_place",
    "concat_with_file_separator_build_owned",
    "delete_end_file_separator_build",
    "delete_end_file_separator_build_in_place",
    "delete_end_file_separator_build_owned",
    "delete_start_file_separator_build",
    "delete_start_file_separator_build_in_place",
    "delete_start_file_separator_build_owned",
    "join_with_file_separator_build",
    "join_with_file_separator_build_in_place",
]

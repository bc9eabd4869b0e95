"""Path helpers using the separator of the platform the interpreter runs on.

The separator is resolved once, when this module is first imported, from
``sys.platform`` or the ``SLASH_FORMATTER_HOST_PLATFORM`` override.
"""

from __future__ import annotations

import logging
import typing as t

from .normalizer import SeparatorNormalizer
from .platform import host_platform, separator_for_platform

logger = logging.getLogger(__name__)

FILE_SEPARATOR: t.Final[str] = separator_for_platform(host_platform())

logger.debug("Host file separator resolved to %r", FILE_SEPARATOR)

_NORMALIZER: t.Final[SeparatorNormalizer] = SeparatorNormalizer(FILE_SEPARATOR)

delete_end_file_separator = _NORMALIZER.delete_end
delete_end_file_separator_owned = _NORMALIZER.delete_end_owned
delete_end_file_separator_in_place = _NORMALIZER.delete_end_in_place

delete_start_file_separator = _NORMALIZER.delete_start
delete_start_file_separator_owned = _NORMALIZER.delete_start_owned
delete_start_file_separator_in_place = _NORMALIZER.delete_start_in_place

add_end_file_separator = _NORMALIZER.add_end
add_end_file_separator_owned = _NORMALIZER.add_end_owned
add_end_file_separator_in_place = _NORMALIZER.add_end_in_place

add_start_file_separator = _NORMALIZER.add_start
add_start_file_separator_owned = _NORMALIZER.add_start_owned
add_start_file_separator_in_place = _NORMALIZER.add_start_in_place

concat_with_file_separator = _NORMALIZER.concat
concat_with_file_separator_owned = _NORMALIZER.concat_owned
concat_with_file_separator_in_place = _NORMALIZER.concat_in_place

join_with_file_separator = _NORMALIZER.join
join_with_file_separator_in_place = _NORMALIZER.join_in_place

concat_literals_with_file_separator = _NORMALIZER.concat_literals

__all__ = [
    "FILE_SEPARATOR",
    "add_end_file_separator",
    "add_end_file_separator_in_place",
    "add_end_file_separator_owned",
    "add_start_file_separator",
    "add_start_file_separator_in_place",
    "add_start_file_separator_owned",
    "concat_literals_with_file_separator",
    "concat_with_file_separator",
    "concat_with_file_separator_in_place",
    "concat_with_file_separator_owned",
    "delete_end_file_separator",
    "delete_end_file_separator_in_place",
    "delete_end_file_separator_owned",
    "delete_start_file_separator",
    "delete_start_file_separator_in_place",
    "delete_start_file_separator_owned",
    "join_with_file_separator",
    "join_with_file_separator_in_place",
]

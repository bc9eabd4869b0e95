"""Path helpers that always use a forward slash.

>>> concat_with_slash("path", "to/")
'path/to'
>>> join_with_slash("path", "to/", "/file/")
'path/to/file'
"""

from __future__ import annotations

import typing as t

from .normalizer import SeparatorNormalizer
from .platform import SLASH

_NORMALIZER: t.Final[SeparatorNormalizer] = SeparatorNormalizer(SLASH)

delete_end_slash = _NORMALIZER.delete_end
delete_end_slash_owned = _NORMALIZER.delete_end_owned
delete_end_slash_in_place = _NORMALIZER.delete_end_in_place

delete_start_slash = _NORMALIZER.delete_start
delete_start_slash_owned = _NORMALIZER.delete_start_owned
delete_start_slash_in_place = _NORMALIZER.delete_start_in_place

add_end_slash = _NORMALIZER.add_end
add_end_slash_owned = _NORMALIZER.add_end_owned
add_end_slash_in_place = _NORMALIZER.add_end_in_place

add_start_slash = _NORMALIZER.add_start
add_start_slash_owned = _NORMALIZER.add_start_owned
add_start_slash_in_place = _NORMALIZER.add_start_in_place

concat_with_slash = _NORMALIZER.concat
concat_with_slash_owned = _NORMALIZER.concat_owned
concat_with_slash_in_place = _NORMALIZER.concat_in_place

join_with_slash = _NORMALIZER.join
join_with_slash_in_place = _NORMALIZER.join_in_place

concat_literals_with_slash = _NORMALIZER.concat_literals

__all__ = [
    "SLASH",
    "add_end_slash",
    "add_end_slash_in_place",
    "add_end_slash_owned",
    "add_start_slash",
    "add_start_slash_in_place",
    "add_start_slash_owned",
    "concat_literals_with_slash",
    "concat_with_slash",
    "concat_with_slash_in_place",
    "concat_with_slash_owned",
    "delete_end_slash",
    "delete_end_slash_in_place",
    "delete_end_slash_owned",
    "delete_start_slash",
    "delete_start_slash_in_place",
    "delete_start_slash_owned",
    "join_with_slash",
    "join_with_slash_in_place",
]

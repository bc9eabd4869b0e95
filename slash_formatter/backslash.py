r"""Path helpers that always use a backslash.

>>> concat_with_backslash("path", "to\\")
'path\\to'
>>> join_with_backslash("path", "to\\", "\\file\\")
'path\\to\\file'
"""

from __future__ import annotations

import typing as t

from .normalizer import SeparatorNormalizer
from .platform import BACKSLASH

_NORMALIZER: t.Final[SeparatorNormalizer] = SeparatorNormalizer(BACKSLASH)

delete_end_backslash = _NORMALIZER.delete_end
delete_end_backslash_owned = _NORMALIZER.delete_end_owned
delete_end_backslash_in_place = _NORMALIZER.delete_end_in_place

delete_start_backslash = _NORMALIZER.delete_start
delete_start_backslash_owned = _NORMALIZER.delete_start_owned
delete_start_backslash_in_place = _NORMALIZER.delete_start_in_place

add_end_backslash = _NORMALIZER.add_end
add_end_backslash_owned = _NORMALIZER.add_end_owned
add_end_backslash_in_place = _NORMALIZER.add_end_in_place

add_start_backslash = _NORMALIZER.add_start
add_start_backslash_owned = _NORMALIZER.add_start_owned
add_start_backslash_in_place = _NORMALIZER.add_start_in_place

concat_with_backslash = _NORMALIZER.concat
concat_with_backslash_owned = _NORMALIZER.concat_owned
concat_with_backslash_in_place = _NORMALIZER.concat_in_place

join_with_backslash = _NORMALIZER.join
join_with_backslash_in_place = _NORMALIZER.join_in_place

concat_literals_with_backslash = _NORMALIZER.concat_literals

__all__ = [
    "BACKSLASH",
    "add_end_backslash",
    "add_end_backslash_in_place",
    "add_end_backslash_owned",
    "add_start_backslash",
    "add_start_backslash_in_place",
    "add_start_backslash_owned",
    "concat_literals_with_backslash",
    "concat_with_backslash",
    "concat_with_backslash_in_place",
    "concat_with_backslash_owned",
    "delete_end_backslash",
    "delete_end_backslash_in_place",
    "delete_end_backslash_owned",
    "delete_start_backslash",
    "delete_start_backslash_in_place",
    "delete_start_backslash_owned",
    "join_with_backslash",
    "join_with_backslash_in_place",
]

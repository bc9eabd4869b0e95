"""Separator-keyed trimming, padding and joining of path strings.

Every transformation comes in three calling conventions:

``view``
    Takes a ``str`` and returns a ``str``. When nothing needs to change the
    argument itself is returned, so no copy is made.
``owned``
    Takes a ``str`` or :class:`~slash_formatter.buffer.PathBuffer` and returns
    a buffer. A buffer argument is edited and handed back rather than copied.
``in_place``
    Takes a :class:`~slash_formatter.buffer.PathBuffer` and edits it, returning
    ``None``.

Only the junction between two fragments is normalised; repeated separators
elsewhere in a fragment are left alone.
"""

from __future__ import annotations

import dataclasses as dc
import typing as t

from . import literals
from ._validators import validate_separator
from .buffer import PathBuffer

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .buffer import TextLike
    from .literals import LiteralValue


def _as_buffer(s: TextLike) -> PathBuffer:
    return s if isinstance(s, PathBuffer) else PathBuffer(s)


@dc.dataclass(frozen=True, slots=True)
class SeparatorNormalizer:
    """Path-string operations bound to a single separator character."""

    separator: str

    def __post_init__(self) -> None:
        """Reject separators that are not a single character."""
        validate_separator(self.separator)

    # -- delete_end -------------------------------------------------------

    def delete_end(self, s: str) -> str:
        """Drop one trailing separator unless *s* is the separator alone."""
        if len(s) > 1 and s.endswith(self.separator):
            return s[:-1]
        return s

    def delete_end_owned(self, s: TextLike) -> PathBuffer:
        """Trim a trailing separator from a buffer, wrapping text first."""
        buffer = _as_buffer(s)
        self.delete_end_in_place(buffer)
        return buffer

    def delete_end_in_place(self, buffer: PathBuffer) -> None:
        """Pop a trailing separator unless the buffer is the separator alone."""
        if len(buffer) > 1 and buffer.endswith(self.separator):
            buffer.pop_end()

    # -- delete_start -----------------------------------------------------

    def delete_start(self, s: str) -> str:
        """Drop one leading separator unless *s* is the separator alone."""
        if len(s) > 1 and s.startswith(self.separator):
            return s[1:]
        return s

    def delete_start_owned(self, s: TextLike) -> PathBuffer:
        """Trim a leading separator from a buffer, wrapping text first."""
        buffer = _as_buffer(s)
        self.delete_start_in_place(buffer)
        return buffer

    def delete_start_in_place(self, buffer: PathBuffer) -> None:
        """Pop a leading separator unless the buffer is the separator alone."""
        if len(buffer) > 1 and buffer.startswith(self.separator):
            buffer.pop_start()

    # -- add_end ----------------------------------------------------------

    def add_end(self, s: str) -> str:
        """Ensure *s* ends with the separator."""
        if s.endswith(self.separator):
            return s
        return s + self.separator

    def add_end_owned(self, s: TextLike) -> PathBuffer:
        """Ensure a buffer ends with the separator, wrapping text first."""
        buffer = _as_buffer(s)
        self.add_end_in_place(buffer)
        return buffer

    def add_end_in_place(self, buffer: PathBuffer) -> None:
        """Append the separator when the buffer does not already end with it."""
        if not buffer.endswith(self.separator):
            buffer.append(self.separator)

    # -- add_start --------------------------------------------------------

    def add_start(self, s: str) -> str:
        """Ensure *s* starts with the separator."""
        if s.startswith(self.separator):
            return s
        return self.separator + s

    def add_start_owned(self, s: TextLike) -> PathBuffer:
        """Ensure a buffer starts with the separator, wrapping text first."""
        buffer = _as_buffer(s)
        self.add_start_in_place(buffer)
        return buffer

    def add_start_in_place(self, buffer: PathBuffer) -> None:
        """Prepend the separator when the buffer does not already start with it."""
        if not buffer.startswith(self.separator):
            buffer.prepend(self.separator)

    # -- concat -----------------------------------------------------------

    def concat(self, s1: TextLike, s2: TextLike) -> str:
        """Join *s1* and *s2* with exactly one separator at the junction."""
        return self.delete_end(self.add_end(str(s1)) + self.delete_start(str(s2)))

    def concat_owned(self, s1: TextLike, s2: TextLike) -> PathBuffer:
        """Join *s2* onto a buffer holding *s1* and return that buffer."""
        buffer = _as_buffer(s1)
        self.concat_in_place(buffer, s2)
        return buffer

    def concat_in_place(self, buffer: PathBuffer, s2: TextLike) -> None:
        """Join *s2* onto *buffer* with one separator at the junction."""
        fragment = self.delete_start(str(s2))
        self.add_end_in_place(buffer)
        buffer.append(fragment)
        self.delete_end_in_place(buffer)

    # -- variadic ---------------------------------------------------------

    def join(self, first: TextLike, *others: TextLike) -> str:
        """Concatenate every fragment, normalising each junction.

        >>> SeparatorNormalizer("/").join("path", "to/", "/file/")
        'path/to/file'
        """
        if not others:
            return str(first)
        buffer = PathBuffer(first)
        self.join_in_place(buffer, *others)
        return str(buffer)

    def join_in_place(self, buffer: PathBuffer, *others: TextLike) -> None:
        """Fold :meth:`concat_in_place` over *others* from left to right."""
        for fragment in others:
            self.concat_in_place(buffer, fragment)

    def concat_literals(
        self, *values: LiteralValue, prefix: str = "", suffix: str = ""
    ) -> str:
        """Interleave literal *values* with the separator.

        >>> SeparatorNormalizer("/").concat_literals("test", 10, "b", True)
        'test/10/b/true'
        """
        return literals.concat_literals(
            self.separator, values, prefix=prefix, suffix=suffix
        )


__all__ = ["SeparatorNormalizer"]

"""Mutable text used by the owned and in-place normalizer variants.

Python strings are immutable, so callers that want to trim or extend a path
without rebuilding it hold a :class:`PathBuffer` instead. The buffer stores
individual characters, which keeps trimming the final character and appending
to the end proportional to the edit rather than to the whole path.
"""

from __future__ import annotations

import typing as t


class PathBuffer:
    """A mutable sequence of characters representing a path fragment."""

    __slots__ = ("_chars",)

    # Mutable containers must not be hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str | PathBuffer = "") -> None:
        self._chars: list[str] = list(str(text))

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"PathBuffer({str(self)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathBuffer):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def startswith(self, char: str) -> bool:
        """Return ``True`` when the first character equals *char*."""
        return bool(self._chars) and self._chars[0] == char

    def endswith(self, char: str) -> bool:
        """Return ``True`` when the last character equals *char*."""
        return bool(self._chars) and self._chars[-1] == char

    def append(self, text: str) -> None:
        """Add *text* to the end of the buffer."""
        self._chars.extend(text)

    def prepend(self, text: str) -> None:
        """Insert *text* at the start of the buffer."""
        self._chars[:0] = text

    def pop_end(self) -> str:
        """Remove and return the last character."""
        return self._chars.pop()

    def pop_start(self) -> str:
        """Remove and return the first character."""
        return self._chars.pop(0)


TextLike: t.TypeAlias = "str | PathBuffer"

__all__ = ["PathBuffer", "TextLike"]

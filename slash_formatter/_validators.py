"""Shared validation helpers."""

from __future__ import annotations

from .errors import InvalidSeparatorError


def validate_separator(separator: object) -> str:
    """Ensure *separator* is a single character and return it."""
    if not isinstance(separator, str):
        msg = f"separator must be a str, not {type(separator).__name__}"
        raise InvalidSeparatorError(msg)

    if len(separator) != 1:
        msg = f"separator must be exactly one character, got {separator!r}"
        raise InvalidSeparatorError(msg)

    return separator

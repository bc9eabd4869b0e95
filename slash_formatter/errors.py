"""Exception hierarchy for slash-formatter."""

from __future__ import annotations


class SlashFormatterError(Exception):
    """Base class for errors raised by slash-formatter."""


class InvalidSeparatorError(SlashFormatterError, ValueError):
    """Raised when a separator is not exactly one character of text."""


class LiteralValueError(SlashFormatterError, TypeError):
    """Raised when a literal has no canonical text representation."""


__all__ = [
    "InvalidSeparatorError",
    "LiteralValueError",
    "SlashFormatterError",
]

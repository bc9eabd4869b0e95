"""Rendering of fixed literal values for separator-joined constants."""

from __future__ import annotations

import typing as t

from .errors import LiteralValueError

LiteralValue: t.TypeAlias = "str | int | float | bool"


def render_literal(value: object) -> str:
    """Return the canonical text of a literal *value*.

    Text is used verbatim, booleans render as ``true``/``false`` and numbers
    through :func:`str`.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    msg = f"cannot render {type(value).__name__} as a path literal"
    raise LiteralValueError(msg)


def concat_literals(
    separator: str,
    values: t.Iterable[LiteralValue],
    *,
    prefix: str = "",
    suffix: str = "",
) -> str:
    """Interleave rendered *values* with *separator* between *prefix*/*suffix*.

    No separators are collapsed: the values are expected to be clean literals
    rather than arbitrary runtime fragments.
    """
    body = separator.join(render_literal(value) for value in values)
    return f"{prefix}{body}{suffix}"


__all__ = ["LiteralValue", "concat_literals", "render_literal"]

"""Measurement and positional access."""

from __future__ import annotations

from typing import Optional

from strkit.text import NUL_UNIT, TextLike, as_units


def length(text: Optional[TextLike]) -> int:
    data = as_units(text)
    return 0 if data is None else len(data)


def char_at(
    text: Optional[TextLike], index: int, *, default: Optional[int] = None
) -> Optional[int]:
    """Return the code unit at ``index``.

    Negative indices do not wrap; they, like indices past the end and an
    absent ``text``, yield ``default``.
    """

    data = as_units(text)
    if data is None or index < 0 or index >= len(data):
        return default
    return data[index]


def first(text: Optional[TextLike], *, default: int = NUL_UNIT) -> int:
    return char_at(text, 0, default=default)


def last(text: Optional[TextLike], *, default: int = NUL_UNIT) -> int:
    return char_at(text, length(text) - 1, default=default)


__all__ = ["length", "char_at", "first", "last"]

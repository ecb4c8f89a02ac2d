"""Linear unit search and brute-force sequence search."""

from __future__ import annotations

from typing import Optional

from strkit.text import TextLike, UnitLike, as_units, ensure_unit


def index_of_unit(text: Optional[TextLike], unit: UnitLike) -> Optional[int]:
    target = ensure_unit(unit)
    data = as_units(text)
    if data is None:
        return None
    for index, candidate in enumerate(data):
        if candidate == target:
            return index
    return None


def index_of_sequence(
    text: Optional[TextLike], pattern: Optional[TextLike]
) -> Optional[int]:
    """Return the first position of ``pattern`` in ``text``.

    Naive O(n*m) scan. An empty pattern matches at 0, even in empty text.
    """

    haystack = as_units(text)
    needle = as_units(pattern)
    if haystack is None or needle is None:
        return None
    if not needle:
        return 0
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        offset = 0
        while offset < width and haystack[start + offset] == needle[offset]:
            offset += 1
        if offset == width:
            return start
    return None


def contains(text: Optional[TextLike], pattern: Optional[TextLike]) -> bool:
    return index_of_sequence(text, pattern) is not None


__all__ = ["index_of_unit", "index_of_sequence", "contains"]

"""Character-class predicates, equality, and palindrome checks."""

from __future__ import annotations

from typing import Callable, Optional

from strkit.text import TextLike, as_units, is_alnum, is_digit, is_letter


def _all_units(text: Optional[TextLike], predicate: Callable[[int], bool]) -> bool:
    # empty text never satisfies a class
    data = as_units(text)
    if not data:
        return False
    return all(predicate(unit) for unit in data)


def is_numeric(text: Optional[TextLike]) -> bool:
    return _all_units(text, is_digit)


def is_alpha(text: Optional[TextLike]) -> bool:
    return _all_units(text, is_letter)


def is_alphanumeric(text: Optional[TextLike]) -> bool:
    return _all_units(text, is_alnum)


def equals(a: Optional[TextLike], b: Optional[TextLike]) -> bool:
    """Unit-by-unit equality; two absent inputs are equal, one is not."""

    left = as_units(a)
    right = as_units(b)
    if left is None or right is None:
        return left is None and right is None
    return left == right


def is_palindrome(text: Optional[TextLike]) -> bool:
    data = as_units(text)
    if data is None:
        return False
    front, back = 0, len(data) - 1
    while front < back:
        if data[front] != data[back]:
            return False
        front += 1
        back -= 1
    return True


__all__ = ["is_numeric", "is_alpha", "is_alphanumeric", "equals", "is_palindrome"]

"""Single code-unit classification and case mapping (ASCII only)."""

from __future__ import annotations

NUL_UNIT = 0

WHITESPACE_UNITS = frozenset(b" \t\n\r\f\v")

_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def is_whitespace(unit: int) -> bool:
    return unit in WHITESPACE_UNITS


def is_digit(unit: int) -> bool:
    return _DIGIT_0 <= unit <= _DIGIT_9


def is_upper(unit: int) -> bool:
    return _UPPER_A <= unit <= _UPPER_Z


def is_lower(unit: int) -> bool:
    return _LOWER_A <= unit <= _LOWER_Z


def is_letter(unit: int) -> bool:
    return is_upper(unit) or is_lower(unit)


def is_alnum(unit: int) -> bool:
    return is_letter(unit) or is_digit(unit)


def to_upper_unit(unit: int) -> int:
    """Map ``a``-``z`` to ``A``-``Z``; every other unit is returned unchanged."""

    return unit - _CASE_OFFSET if is_lower(unit) else unit


def to_lower_unit(unit: int) -> int:
    """Map ``A``-``Z`` to ``a``-``z``; every other unit is returned unchanged."""

    return unit + _CASE_OFFSET if is_upper(unit) else unit


def translate_into(source: bytes, table: bytes, out: bytearray) -> None:
    """Write ``table[unit]`` for each unit of ``source`` into ``out`` in place."""

    for index, unit in enumerate(source):
        out[index] = table[unit]


__all__ = [
    "NUL_UNIT",
    "WHITESPACE_UNITS",
    "is_whitespace",
    "is_digit",
    "is_upper",
    "is_lower",
    "is_letter",
    "is_alnum",
    "to_upper_unit",
    "to_lower_unit",
    "translate_into",
]

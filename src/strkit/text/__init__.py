"""Text data model: code units, buffers, views, and token lists."""

from .buffer import Mutation, TextBuffer, TextView, allocate, build_owned
from .errors import TextValidationError, TokenListReleasedError
from .tokens import TokenList, release
from .units import (
    NUL_UNIT,
    WHITESPACE_UNITS,
    is_alnum,
    is_digit,
    is_letter,
    is_whitespace,
    to_lower_unit,
    to_upper_unit,
    translate_into,
)
from .validation import (
    MutableText,
    TextLike,
    UnitLike,
    as_units,
    ensure_buffer,
    ensure_unit,
)

__all__ = [
    "NUL_UNIT",
    "WHITESPACE_UNITS",
    "Mutation",
    "MutableText",
    "TextBuffer",
    "TextView",
    "TextLike",
    "UnitLike",
    "TokenList",
    "TextValidationError",
    "TokenListReleasedError",
    "allocate",
    "as_units",
    "build_owned",
    "ensure_buffer",
    "ensure_unit",
    "is_alnum",
    "is_digit",
    "is_letter",
    "is_whitespace",
    "release",
    "to_lower_unit",
    "to_upper_unit",
    "translate_into",
]

"""The text operation catalog, grouped by purpose."""

from .case import (
    capitalize,
    capitalize_copy,
    lowercase,
    lowercase_copy,
    title_case,
    title_case_copy,
    uppercase,
    uppercase_copy,
)
from .construct import (
    concat_copy,
    repeat_copy,
    replace_unit,
    replace_unit_copy,
    reverse,
    reverse_copy,
    substring_copy,
)
from .measure import char_at, first, last, length
from .search import contains, index_of_sequence, index_of_unit
from .split import join, release, split
from .trim import (
    trim_both,
    trim_both_copy,
    trim_left,
    trim_left_copy,
    trim_right,
    trim_right_copy,
)
from .validate import equals, is_alpha, is_alphanumeric, is_numeric, is_palindrome

__all__ = [
    "length",
    "char_at",
    "first",
    "last",
    "capitalize",
    "capitalize_copy",
    "uppercase",
    "uppercase_copy",
    "lowercase",
    "lowercase_copy",
    "title_case",
    "title_case_copy",
    "trim_both",
    "trim_both_copy",
    "trim_left",
    "trim_left_copy",
    "trim_right",
    "trim_right_copy",
    "index_of_unit",
    "index_of_sequence",
    "contains",
    "is_numeric",
    "is_alpha",
    "is_alphanumeric",
    "equals",
    "is_palindrome",
    "reverse",
    "reverse_copy",
    "repeat_copy",
    "concat_copy",
    "substring_copy",
    "replace_unit",
    "replace_unit_copy",
    "split",
    "join",
    "release",
]

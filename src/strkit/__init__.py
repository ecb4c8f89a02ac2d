"""ASCII text operations with in-place and copying variants."""

from .ops import *  # noqa: F401,F403
from .ops import __all__ as _ops_all
from .text import (
    NUL_UNIT,
    TextBuffer,
    TextValidationError,
    TextView,
    TokenList,
    TokenListReleasedError,
    to_lower_unit,
    to_upper_unit,
)

__all__ = [
    *_ops_all,
    "NUL_UNIT",
    "TextBuffer",
    "TextView",
    "TokenList",
    "TextValidationError",
    "TokenListReleasedError",
    "to_lower_unit",
    "to_upper_unit",
]

__version__ = "0.1.0"

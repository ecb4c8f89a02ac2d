"""Exceptions raised by the text data model."""

from __future__ import annotations

from typing import Any


class TextValidationError(TypeError):
    """Raised when an argument cannot be interpreted as 8-bit text or a code unit."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class TokenListReleasedError(RuntimeError):
    """Raised when a released ``TokenList`` is read."""


__all__ = ["TextValidationError", "TokenListReleasedError"]

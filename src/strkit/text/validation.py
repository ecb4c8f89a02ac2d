"""Coercion helpers shared by every operation module."""

from __future__ import annotations

from typing import Optional, Union

from .buffer import TextBuffer, TextView
from .errors import TextValidationError
from .units import NUL_UNIT

TextLike = Union[bytes, bytearray, memoryview, str, TextBuffer, TextView]
MutableText = Union[TextBuffer, TextView, bytearray]
UnitLike = Union[int, str, bytes]


def _encode(text: str) -> bytes:
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise TextValidationError(
            "text must only contain 8-bit code units", value=text
        ) from exc


def _until_end_marker(storage: bytearray) -> memoryview:
    # a bare bytearray ends at its first NUL, same rule ensure_buffer applies
    end = storage.find(NUL_UNIT)
    view = memoryview(storage)
    return view if end < 0 else view[:end]


def as_units(text: Optional[TextLike]) -> Optional[bytes]:
    """Return the content of ``text`` as ``bytes``, or ``None`` when absent."""

    if text is None:
        return None
    if isinstance(text, bytes):
        return text
    if isinstance(text, str):
        return _encode(text)
    if isinstance(text, bytearray):
        return bytes(_until_end_marker(text))
    if isinstance(text, memoryview):
        return bytes(text)
    if isinstance(text, TextBuffer):
        return text.snapshot()
    if isinstance(text, TextView):
        return text.to_bytes()
    raise TextValidationError(
        f"expected text, got {type(text).__name__}", value=text
    )


def ensure_unit(value: UnitLike, *, name: str = "unit") -> int:
    """Normalize ``value`` to a single code unit in ``0..255``."""

    if isinstance(value, bool):
        raise TextValidationError(f"{name} must be a code unit, got bool", value=value)
    if isinstance(value, int):
        if 0 <= value <= 255:
            return value
        raise TextValidationError(f"{name} {value} is not an 8-bit code unit", value=value)
    if isinstance(value, str):
        value = _encode(value)
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return value[0]
    raise TextValidationError(f"{name} must be exactly one code unit", value=value)


def _whole_buffer(view: TextView) -> TextBuffer:
    buffer = view.buffer
    if not view.is_current:
        raise TextValidationError("view is stale; the buffer changed since", value=view)
    if view.offset != 0 or view.length != buffer.length:
        raise TextValidationError(
            f"in-place operations need a view of the whole buffer, got "
            f"[{view.offset}, {view.offset + view.length}) of {buffer.length}",
            value=view,
        )
    return buffer


def ensure_buffer(text: Optional[MutableText]) -> Optional[TextBuffer]:
    """Resolve the target of an in-place operation.

    A bare ``bytearray`` is adopted as storage (no copy); its logical
    content ends at the first ``NUL_UNIT``.

    A ``TextView`` is accepted only while current and covering the whole
    logical content of its buffer.
    """

    if text is None:
        return None
    if isinstance(text, TextBuffer):
        return text
    if isinstance(text, TextView):
        return _whole_buffer(text)
    if isinstance(text, bytearray):
        return TextBuffer(text)
    raise TextValidationError(
        f"in-place operations need a mutable buffer, got {type(text).__name__}",
        value=text,
    )


__all__ = [
    "MutableText",
    "TextLike",
    "UnitLike",
    "as_units",
    "ensure_unit",
    "ensure_buffer",
]

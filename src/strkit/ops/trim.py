"""Whitespace trimming.

In-place variants keep the original storage: retained content is shifted
to the front and the logical length shrinks. The returned ``TextView``
always starts at offset 0 of that storage.
"""

from __future__ import annotations

from typing import Optional

from strkit.text import (
    MutableText,
    TextLike,
    TextView,
    as_units,
    build_owned,
    ensure_buffer,
    is_whitespace,
)


def _content_start(data: bytes) -> int:
    start = 0
    while start < len(data) and is_whitespace(data[start]):
        start += 1
    return start


def _content_end(data: bytes, start: int = 0) -> int:
    """Exclusive end of the content; never below ``start``."""

    end = len(data)
    while end > start and is_whitespace(data[end - 1]):
        end -= 1
    return end


def _shift_in_place(
    label: str, text: Optional[MutableText], *, left: bool, right: bool
) -> Optional[TextView]:
    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate(label) as tx:
        data = target.snapshot()
        start = _content_start(data) if left else 0
        end = _content_end(data, start) if right else len(data)
        if start > 0:
            tx.write(0, data[start:end])
        tx.truncate(end - start)
        return tx.commit()


def _slice_copy(
    label: str, text: Optional[TextLike], *, left: bool, right: bool
) -> Optional[bytes]:
    data = as_units(text)
    if data is None:
        return None
    start = _content_start(data) if left else 0
    end = _content_end(data, start) if right else len(data)

    def fill(out: bytearray) -> None:
        out[: end - start] = memoryview(data)[start:end]

    return build_owned(label, end - start, fill)


def trim_both(text: Optional[MutableText]) -> Optional[TextView]:
    return _shift_in_place("trim::trim_both", text, left=True, right=True)


def trim_both_copy(text: Optional[TextLike]) -> Optional[bytes]:
    return _slice_copy("trim::trim_both_copy", text, left=True, right=True)


def trim_left(text: Optional[MutableText]) -> Optional[TextView]:
    return _shift_in_place("trim::trim_left", text, left=True, right=False)


def trim_left_copy(text: Optional[TextLike]) -> Optional[bytes]:
    return _slice_copy("trim::trim_left_copy", text, left=True, right=False)


def trim_right(text: Optional[MutableText]) -> Optional[TextView]:
    """Move the logical end left past trailing whitespace; nothing shifts."""

    return _shift_in_place("trim::trim_right", text, left=False, right=True)


def trim_right_copy(text: Optional[TextLike]) -> Optional[bytes]:
    return _slice_copy("trim::trim_right_copy", text, left=False, right=True)


__all__ = [
    "trim_both",
    "trim_both_copy",
    "trim_left",
    "trim_left_copy",
    "trim_right",
    "trim_right_copy",
]

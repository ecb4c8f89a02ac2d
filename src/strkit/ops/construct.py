"""Reverse, repeat, concatenate, substring, and unit replacement.

Out-of-range arguments are clamped, never rejected.
"""

from __future__ import annotations

from typing import Optional

from strkit.runtime.telemetry import span
from strkit.text import (
    MutableText,
    TextLike,
    TextView,
    UnitLike,
    as_units,
    build_owned,
    ensure_buffer,
    ensure_unit,
    translate_into,
)


def reverse(text: Optional[MutableText]) -> Optional[TextView]:
    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate("construct::reverse") as tx:
        storage = target.storage
        front, back = 0, target.length - 1
        while front < back:
            storage[front], storage[back] = storage[back], storage[front]
            front += 1
            back -= 1
        return tx.commit()


def reverse_copy(text: Optional[TextLike]) -> Optional[bytes]:
    data = as_units(text)
    if data is None:
        return None

    def fill(out: bytearray) -> None:
        out[: len(data)] = data
        out.reverse()

    return build_owned("construct::reverse_copy", len(data), fill)


def repeat_copy(text: Optional[TextLike], times: int) -> Optional[bytes]:
    """Concatenate ``text`` with itself ``times`` times.

    ``times <= 0`` and empty text give ``b""``; only absent text gives ``None``.
    """

    data = as_units(text)
    if data is None:
        return None
    if times <= 0 or not data:
        return b""
    width = len(data)
    size = width * times
    with span(
        "construct::repeat_copy",
        component="construct",
        metadata={"times": times, "size": size},
    ):

        def fill(out: bytearray) -> None:
            for copy in range(times):
                out[copy * width : (copy + 1) * width] = data

        return build_owned("construct::repeat_copy", size, fill)


def concat_copy(a: Optional[TextLike], b: Optional[TextLike]) -> Optional[bytes]:
    """Join two texts; an absent operand counts as empty."""

    left = as_units(a) or b""
    right = as_units(b) or b""
    size = len(left) + len(right)
    with span(
        "construct::concat_copy", component="construct", metadata={"size": size}
    ):

        def fill(out: bytearray) -> None:
            out[: len(left)] = left
            out[len(left) : size] = right

        return build_owned("construct::concat_copy", size, fill)


def substring_copy(
    text: Optional[TextLike], start: int, length: int
) -> Optional[bytes]:
    """Copy ``length`` units from ``start``.

    A negative ``start`` clamps to 0; a ``start`` at or past the end yields
    ``b""``; a negative or overlong ``length`` means "to the end".
    """

    data = as_units(text)
    if data is None:
        return None
    total = len(data)
    start = max(start, 0)
    if start >= total:
        return b""
    if length < 0 or start + length > total:
        length = total - start
    with span(
        "construct::substring_copy",
        component="construct",
        metadata={"start": start, "length": length},
    ):

        def fill(out: bytearray) -> None:
            out[:length] = memoryview(data)[start : start + length]

        return build_owned("construct::substring_copy", length, fill)


def _replacement_table(find: UnitLike, replacement: UnitLike) -> bytes:
    table = bytearray(range(256))
    table[ensure_unit(find, name="find")] = ensure_unit(replacement, name="replacement")
    return bytes(table)


def replace_unit(
    text: Optional[MutableText], find: UnitLike, replacement: UnitLike
) -> Optional[TextView]:
    table = _replacement_table(find, replacement)
    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate("construct::replace_unit") as tx:
        translate_into(target.snapshot(), table, target.storage)
        return tx.commit()


def replace_unit_copy(
    text: Optional[TextLike], find: UnitLike, replacement: UnitLike
) -> Optional[bytes]:
    table = _replacement_table(find, replacement)
    data = as_units(text)
    if data is None:
        return None
    return build_owned(
        "construct::replace_unit_copy",
        len(data),
        lambda out: translate_into(data, table, out),
    )


__all__ = [
    "reverse",
    "reverse_copy",
    "repeat_copy",
    "concat_copy",
    "substring_copy",
    "replace_unit",
    "replace_unit_copy",
]

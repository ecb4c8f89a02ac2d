"""Delimiter splitting into a ``TokenList`` and joining back into text."""

from __future__ import annotations

from typing import Iterable, List, Optional

from strkit.runtime.telemetry import allocation_failed, span
from strkit.text import (
    TextLike,
    TokenList,
    UnitLike,
    as_units,
    build_owned,
    ensure_unit,
    release,
)


def _owned_slice(data: bytes, start: int, end: int) -> Optional[bytes]:
    def fill(out: bytearray) -> None:
        out[: end - start] = memoryview(data)[start:end]

    return build_owned("split::token", end - start, fill)


def split(text: Optional[TextLike], delimiter: UnitLike) -> Optional[TokenList]:
    """Split ``text`` on every ``delimiter`` unit.

    Always yields ``occurrences + 1`` tokens: text without the delimiter
    (including empty text) is a single token, and leading, trailing, or
    adjacent delimiters produce empty tokens. Returns ``None`` for absent
    text, or when any allocation fails; in that case every token built so
    far is discarded first.
    """

    unit = ensure_unit(delimiter, name="delimiter")
    data = as_units(text)
    if data is None:
        return None

    with span(
        "split::split",
        component="split",
        metadata={"length": len(data), "delimiter": unit},
    ) as handle:
        count = data.count(unit) + 1
        try:
            tokens: List[bytes] = [b""] * count
        except (MemoryError, OverflowError):
            allocation_failed("split::split", count)
            return None

        start = 0
        for slot in range(count):
            end = data.find(unit, start)
            if end < 0:
                end = len(data)
            token = _owned_slice(data, start, end)
            if token is None:
                handle.note("discarded_tokens", slot)
                allocation_failed("split::split", end - start, discarded_tokens=slot)
                tokens.clear()
                return None
            tokens[slot] = token
            start = end + 1

        handle.note("tokens", count)
        return TokenList(tokens)


def join(
    tokens: Optional[Iterable[Optional[TextLike]]], separator: UnitLike
) -> Optional[bytes]:
    """Concatenate ``tokens`` with ``separator`` strictly between them.

    An absent token joins as empty text; zero tokens give ``b""``.
    """

    unit = ensure_unit(separator, name="separator")
    if tokens is None:
        return None
    parts = [as_units(token) or b"" for token in tokens]
    if not parts:
        return b""

    size = sum(len(part) for part in parts) + len(parts) - 1
    with span(
        "split::join",
        component="split",
        metadata={"tokens": len(parts), "size": size},
    ):

        def fill(out: bytearray) -> None:
            position = 0
            for index, part in enumerate(parts):
                if index:
                    out[position] = unit
                    position += 1
                out[position : position + len(part)] = part
                position += len(part)

        return build_owned("split::join", size, fill)


__all__ = ["split", "join", "release"]

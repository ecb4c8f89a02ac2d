"""Case transforms, each as an in-place mutator and a copying constructor."""

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
    to_lower_unit,
    to_upper_unit,
    translate_into,
)

_UPPER_TABLE = bytes(to_upper_unit(unit) for unit in range(256))
_LOWER_TABLE = bytes(to_lower_unit(unit) for unit in range(256))


def _title_into(source: bytes, out: bytearray) -> None:
    at_word_start = True
    for index, unit in enumerate(source):
        if is_whitespace(unit):
            at_word_start = True
            out[index] = unit
        elif at_word_start:
            at_word_start = False
            out[index] = to_upper_unit(unit)
        else:
            out[index] = to_lower_unit(unit)


def _translate_in_place(
    label: str, text: Optional[MutableText], table: bytes
) -> Optional[TextView]:
    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate(label) as tx:
        translate_into(target.snapshot(), table, target.storage)
        return tx.commit()


def _translate_copy(
    label: str, text: Optional[TextLike], table: bytes
) -> Optional[bytes]:
    data = as_units(text)
    if data is None:
        return None

    return build_owned(
        label, len(data), lambda out: translate_into(data, table, out)
    )


def capitalize(text: Optional[MutableText]) -> Optional[TextView]:
    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate("case::capitalize") as tx:
        if target.length:
            tx.set_unit(0, to_upper_unit(target.storage[0]))
        return tx.commit()


def capitalize_copy(text: Optional[TextLike]) -> Optional[bytes]:
    data = as_units(text)
    if data is None:
        return None

    def fill(out: bytearray) -> None:
        out[: len(data)] = data
        if out:
            out[0] = to_upper_unit(out[0])

    return build_owned("case::capitalize_copy", len(data), fill)


def uppercase(text: Optional[MutableText]) -> Optional[TextView]:
    return _translate_in_place("case::uppercase", text, _UPPER_TABLE)


def uppercase_copy(text: Optional[TextLike]) -> Optional[bytes]:
    return _translate_copy("case::uppercase_copy", text, _UPPER_TABLE)


def lowercase(text: Optional[MutableText]) -> Optional[TextView]:
    return _translate_in_place("case::lowercase", text, _LOWER_TABLE)


def lowercase_copy(text: Optional[TextLike]) -> Optional[bytes]:
    return _translate_copy("case::lowercase_copy", text, _LOWER_TABLE)


def title_case(text: Optional[MutableText]) -> Optional[TextView]:
    """Upper-case the first unit of every word and lower-case the rest."""

    target = ensure_buffer(text)
    if target is None:
        return None
    with target.mutate("case::title_case") as tx:
        _title_into(target.snapshot(), target.storage)
        return tx.commit()


def title_case_copy(text: Optional[TextLike]) -> Optional[bytes]:
    data = as_units(text)
    if data is None:
        return None
    return build_owned(
        "case::title_case_copy", len(data), lambda out: _title_into(data, out)
    )


__all__ = [
    "capitalize",
    "capitalize_copy",
    "uppercase",
    "uppercase_copy",
    "lowercase",
    "lowercase_copy",
    "title_case",
    "title_case_copy",
]

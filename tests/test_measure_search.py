import pytest

from strkit import (
    NUL_UNIT,
    TextBuffer,
    char_at,
    contains,
    first,
    index_of_sequence,
    index_of_unit,
    last,
    length,
)


def test_length_counts_units() -> None:
    assert length("Hello, World!") == 13
    assert length(b"") == 0
    assert length(None) == 0
    assert length(TextBuffer.from_text("abc", capacity=10)) == 3


def test_char_at_in_range() -> None:
    assert char_at("abc", 0) == ord("a")
    assert char_at("abc", 2) == ord("c")


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_char_at_out_of_range_is_none(index: int) -> None:
    assert char_at("abc", index) is None


def test_char_at_absent_text() -> None:
    assert char_at(None, 0) is None
    assert char_at(None, 0, default=NUL_UNIT) == NUL_UNIT


def test_first_and_last() -> None:
    assert first("Hello") == ord("H")
    assert last("Hello") == ord("o")
    assert first("x") == last("x") == ord("x")


def test_first_and_last_fall_back_to_nul_unit() -> None:
    assert first("") == NUL_UNIT
    assert last("") == NUL_UNIT
    assert first(None) == NUL_UNIT
    assert last(None) == NUL_UNIT
    assert last(None, default=ord("?")) == ord("?")


def test_index_of_unit() -> None:
    assert index_of_unit("Hello, World!", "o") == 4
    assert index_of_unit("Hello, World!", ord("W")) == 7
    assert index_of_unit("Hello", "z") is None
    assert index_of_unit("", "a") is None
    assert index_of_unit(None, "a") is None


def test_index_of_sequence() -> None:
    assert index_of_sequence("Hello, World!", "World") == 7
    assert index_of_sequence("aaab", "aab") == 1
    assert index_of_sequence("abc", "abcd") is None
    assert index_of_sequence("abc", "abd") is None
    assert index_of_sequence("abc", "c") == 2


def test_index_of_sequence_empty_pattern_matches_at_zero() -> None:
    assert index_of_sequence("abc", "") == 0
    assert index_of_sequence("", "") == 0


def test_index_of_sequence_absent_inputs() -> None:
    assert index_of_sequence(None, "a") is None
    assert index_of_sequence("a", None) is None
    assert index_of_sequence(None, None) is None


def test_contains_agrees_with_index_of_sequence() -> None:
    assert contains("Hello, World!", ", W")
    assert not contains("Hello, World!", "world")
    assert contains("anything", "")
    assert not contains(None, "")

import pytest

from strkit import (
    TextBuffer,
    TextValidationError,
    concat_copy,
    repeat_copy,
    replace_unit,
    replace_unit_copy,
    reverse,
    reverse_copy,
    substring_copy,
)
from strkit.text import buffer as text_buffer


def test_reverse_copy() -> None:
    assert reverse_copy("Hello, World!") == b"!dlroW ,olleH"
    assert reverse_copy("") == b""
    assert reverse_copy(None) is None


def test_reverse_in_place_swaps_within_storage() -> None:
    buffer = TextBuffer.from_text("abcde", capacity=8)

    view = reverse(buffer)

    assert view == b"edcba"
    assert bytes(buffer.storage) == b"edcba\x00\x00\x00"


def test_reverse_in_place_short_inputs() -> None:
    assert reverse(bytearray(b"")) == b""
    assert reverse(bytearray(b"z")) == b"z"
    assert reverse(None) is None


def test_repeat_copy() -> None:
    assert repeat_copy("ab", 3) == b"ababab"
    assert repeat_copy("ab", 1) == b"ab"


@pytest.mark.parametrize(("text", "times"), [("ab", 0), ("ab", -4), ("", 5)])
def test_repeat_copy_degenerate_is_empty(text: str, times: int) -> None:
    assert repeat_copy(text, times) == b""


def test_repeat_copy_absent() -> None:
    assert repeat_copy(None, 3) is None


def test_concat_copy_treats_absence_as_empty() -> None:
    assert concat_copy("foo", "bar") == b"foobar"
    assert concat_copy(None, "bar") == b"bar"
    assert concat_copy("foo", None) == b"foo"
    assert concat_copy(None, None) == b""


@pytest.mark.parametrize(
    ("start", "length", "expected"),
    [
        (0, 3, b"abc"),
        (2, 2, b"cd"),
        (-3, 4, b"abcd"),
        (10, 2, b""),
        (6, 1, b""),
        (4, 10, b"ef"),
        (1, -1, b"bcdef"),
        (3, 0, b""),
    ],
)
def test_substring_copy_clamps(start: int, length: int, expected: bytes) -> None:
    assert substring_copy("abcdef", start, length) == expected


def test_substring_copy_absent() -> None:
    assert substring_copy(None, 0, 1) is None


def test_replace_unit_copy() -> None:
    source = "a-b-c"

    assert replace_unit_copy(source, "-", "+") == b"a+b+c"
    assert replace_unit_copy(source, "x", "+") == b"a-b-c"
    assert replace_unit_copy(None, "-", "+") is None


def test_replace_unit_in_place() -> None:
    storage = bytearray(b"path/to/file")

    view = replace_unit(storage, ord("/"), b"\\")

    assert view == b"path\\to\\file"
    assert storage == bytearray(b"path\\to\\file")


def test_replace_unit_rejects_multi_unit_arguments() -> None:
    with pytest.raises(TextValidationError):
        replace_unit_copy("abc", "ab", "x")


def test_repeat_copy_past_index_range_reports_no_result() -> None:
    assert repeat_copy("ab", 2**62) is None


def test_copies_fill_the_presized_scratch(monkeypatch) -> None:
    handed_out: list[bytearray] = []
    original = text_buffer.allocate

    def tracking_allocate(size: int) -> bytearray:
        scratch = original(size)
        handed_out.append(scratch)
        return scratch

    monkeypatch.setattr(text_buffer, "allocate", tracking_allocate)

    assert reverse_copy("abc") == b"cba"
    assert substring_copy("abcdef", 1, 3) == b"bcd"
    assert replace_unit_copy("a-b", "-", "+") == b"a+b"

    assert handed_out == [bytearray(b"cba"), bytearray(b"bcd"), bytearray(b"a+b")]

import pytest

from strkit.text import (
    NUL_UNIT,
    TextBuffer,
    TextValidationError,
    TextView,
    TokenList,
    TokenListReleasedError,
    as_units,
    ensure_buffer,
    ensure_unit,
    release,
    to_lower_unit,
    to_upper_unit,
)


def test_unit_case_mapping_only_touches_letters() -> None:
    assert to_upper_unit(ord("a")) == ord("A")
    assert to_upper_unit(ord("z")) == ord("Z")
    assert to_upper_unit(ord("A")) == ord("A")
    assert to_upper_unit(ord("{")) == ord("{")
    assert to_lower_unit(ord("Q")) == ord("q")
    assert to_lower_unit(ord("@")) == ord("@")
    assert to_lower_unit(ord("[")) == ord("[")


def test_as_units_accepts_text_likes() -> None:
    buffer = TextBuffer.from_text("abc", capacity=8)

    assert as_units(None) is None
    assert as_units("abc") == b"abc"
    assert as_units(b"abc") == b"abc"
    assert as_units(bytearray(b"abc")) == b"abc"
    assert as_units(memoryview(b"abc")) == b"abc"
    assert as_units(buffer) == b"abc"
    assert as_units(buffer.view()) == b"abc"


def test_as_units_rejects_wide_text_and_other_types() -> None:
    with pytest.raises(TextValidationError):
        as_units("snow ☃")

    with pytest.raises(TextValidationError) as info:
        as_units(42)  # type: ignore[arg-type]
    assert info.value.value == 42


def test_ensure_unit_normalizes_forms() -> None:
    assert ensure_unit(",") == ord(",")
    assert ensure_unit(b",") == ord(",")
    assert ensure_unit(44) == 44


@pytest.mark.parametrize("bad", ["", "ab", b"", 256, -1, True])
def test_ensure_unit_rejects_non_units(bad: object) -> None:
    with pytest.raises(TextValidationError):
        ensure_unit(bad)  # type: ignore[arg-type]


def test_ensure_buffer_adopts_bytearray_without_copy() -> None:
    storage = bytearray(b"hi\x00\x00")

    target = ensure_buffer(storage)

    assert target is not None
    assert target.storage is storage
    assert target.length == 2
    assert target.capacity == 4


def test_ensure_buffer_refuses_immutable_text() -> None:
    with pytest.raises(TextValidationError):
        ensure_buffer(b"abc")  # type: ignore[arg-type]
    with pytest.raises(TextValidationError):
        ensure_buffer("abc")  # type: ignore[arg-type]
    assert ensure_buffer(None) is None


def test_text_buffer_from_text_reserves_capacity() -> None:
    buffer = TextBuffer.from_text("abc", capacity=6, name="scratch")

    assert len(buffer) == 3
    assert buffer.capacity == 6
    assert buffer.snapshot() == b"abc"
    assert bytes(buffer.storage) == b"abc\x00\x00\x00"
    assert buffer.version == 0


def test_mutation_truncate_zeroes_tail_and_bumps_version() -> None:
    buffer = TextBuffer.from_text("abcdef")

    with buffer.mutate("test::truncate") as tx:
        tx.truncate(2)
        view = tx.commit()

    assert view == b"ab"
    assert buffer.version == 1
    assert bytes(buffer.storage) == b"ab\x00\x00\x00\x00"
    assert buffer.capacity == 6


def test_mutation_write_is_bounded_by_capacity() -> None:
    buffer = TextBuffer.from_text("abc")

    with pytest.raises(IndexError):
        with buffer.mutate("test::overrun") as tx:
            tx.write(2, b"xyz")

    assert buffer.snapshot() == b"abc"
    assert buffer.version == 0


def test_text_view_tracks_buffer_version() -> None:
    buffer = TextBuffer.from_text("abc")
    view = buffer.view()

    assert isinstance(view, TextView)
    assert view.is_current
    assert bytes(view) == b"abc"
    assert view == TextView(buffer=buffer, offset=0, length=3, version=0)

    with buffer.mutate("test::touch") as tx:
        tx.commit()

    assert not view.is_current
    assert view != "abc"


def test_token_list_behaves_as_sequence() -> None:
    tokens = TokenList([b"a", b"", b"c"])

    assert len(tokens) == 3
    assert tokens[0] == b"a"
    assert tokens[-1] == b"c"
    assert tokens[1:] == [b"", b"c"]
    assert list(tokens) == [b"a", b"", b"c"]
    assert tokens == [b"a", b"", b"c"]
    assert tokens == TokenList((b"a", b"", b"c"))
    assert b"c" in tokens


def test_token_list_release_is_single_shot() -> None:
    tokens = TokenList([b"a", b"b"])

    tokens.release()
    tokens.release()

    assert tokens.released
    with pytest.raises(TokenListReleasedError):
        len(tokens)
    with pytest.raises(TokenListReleasedError):
        tokens[0]
    assert repr(tokens) == "TokenList(<released>)"


def test_token_list_context_manager_releases() -> None:
    with TokenList([b"x"]) as tokens:
        assert tokens.to_list() == [b"x"]

    assert tokens.released


def test_release_accepts_none() -> None:
    release(None)
    tokens = TokenList([b"x"])
    release(tokens)
    assert tokens.released


def test_nul_unit_is_zero() -> None:
    assert NUL_UNIT == 0

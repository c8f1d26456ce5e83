import pytest

from tgshell.cursor_buffer import (
    Abs,
    CursorBuffer,
    DeletingTooMuch,
    InvalidAbsoluteLocation,
    InvalidRelativeLocation,
    Rel,
    after,
    back,
    before,
    cursor,
    find,
    find_back,
    find_char,
    find_char_back,
    front,
)


def test_basic_insert_delete():
    cb = CursorBuffer()
    cb.insert(cursor(), "hello world")
    assert cb.slice() == "hello world"
    assert cb.cursor == 11

    cb.delete(front(), Abs(6))
    assert cb.slice() == "world"
    assert cb.cursor == 0

    cb.delete_before(back(cb), Abs(2))
    assert cb.slice() == "wo"
    assert cb.cursor == 2


def test_slice():
    cb = CursorBuffer()
    cb.insert(cursor(), "hello world")
    assert cb.slice(None, 2) == "he"
    assert cb.slice(None, 3) == "hel"


def test_slice_out_of_bounds():
    cb = CursorBuffer.from_text("abc")
    with pytest.raises(IndexError):
        cb.slice(0, 10)


def test_find_char():
    cb = CursorBuffer.from_text("hello")
    assert find_char(cb, cursor(), "l") == Rel(2)
    assert find_char(cb, cursor(), "x") is None


def test_find_char_back():
    cb = CursorBuffer.from_text("hello")
    cb.move_cursor(back(cb))
    assert find_char_back(cb, cursor(), "l") == Rel(-2)
    assert find_char_back(cb, cursor(), "x") is None


def test_find_with_predicate_from_absolute():
    cb = CursorBuffer.from_text("ab cd")
    assert find(cb, front(), str.isspace) == Abs(2)
    assert find_back(cb, back(cb), str.isspace) == Abs(2)


def test_utf8_basic():
    cb = CursorBuffer.from_text("こんにちは")
    cb.move_cursor(after())
    assert cb.cursor == 1
    cb.insert(cursor(), "こここ")
    assert cb.cursor == 4
    assert len(cb) == 8


def test_location_aliases():
    assert cursor() == Rel(0)
    assert before() == Rel(-1)
    assert after() == Rel(1)
    assert front() == Abs(0)
    assert back(CursorBuffer.from_text("abc")) == Abs(3)


def test_location_addition():
    assert Abs(3) + Rel(-1) == Abs(2)
    assert Rel(2) + Abs(1) == Abs(3)
    assert Rel(2) + Rel(-5) == Rel(-3)
    assert Abs(1) + Abs(2) == Abs(3)


def test_invalid_absolute_location():
    cb = CursorBuffer.from_text("hello")
    with pytest.raises(InvalidAbsoluteLocation) as info:
        cb.move_cursor(Abs(10))
    assert info.value.index == 10
    assert str(info.value) == "Invalid absolute index 10"


def test_invalid_relative_location():
    cb = CursorBuffer.from_text("hello")
    with pytest.raises(InvalidRelativeLocation) as info:
        cb.move_cursor(before())
    assert info.value.offset == -1


def test_insert_inplace_keeps_cursor():
    cb = CursorBuffer.from_text("hello")
    cb.insert_inplace(Abs(1), "EL")
    assert str(cb) == "hELlo"
    assert cb.cursor == 0


def test_insert_inplace_past_end():
    cb = CursorBuffer.from_text("hi")
    with pytest.raises(DeletingTooMuch):
        cb.insert_inplace(Abs(1), "xyz")


def test_delete_reversed_range_moves_to_start():
    cb = CursorBuffer.from_text("abcdef")
    cb.move_cursor(Abs(4))
    cb.delete(cursor(), Abs(1))
    assert str(cb) == "aef"
    assert cb.cursor == 1


def test_location_slice():
    cb = CursorBuffer.from_text("hello world")
    cb.move_cursor(Abs(6))
    assert cb.location_slice(cursor(), back(cb)) == "world"
    assert cb.location_slice(cursor(), front()) == "hello "


def test_char_at():
    cb = CursorBuffer.from_text("ab")
    assert cb.char_at(cursor()) == "a"
    assert cb.char_at(Abs(2)) is None
    assert cb.char_at(before()) is None


def test_chars_from_location():
    cb = CursorBuffer.from_text("hello")
    assert "".join(cb.chars(Abs(2))) == "llo"


def test_clear():
    cb = CursorBuffer.from_text("abc")
    cb.move_cursor(back(cb))
    cb.clear()
    assert cb.is_empty()
    assert cb.cursor == 0
    assert str(cb) == ""


def test_insert_at_absolute_location():
    cb = CursorBuffer.from_text("ac")
    cb.insert(Abs(1), "b")
    assert str(cb) == "abc"
    assert cb.cursor == 2
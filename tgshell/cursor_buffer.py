"""Editable text buffer with a cursor and relative or absolute locations."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass


class CursorBufferError(Exception):
    """Base error for cursor buffer operations."""


class InvalidRelativeLocation(CursorBufferError):
    def __init__(self, offset: int) -> None:
        super().__init__(f"Invalid relative offset {offset}")
        self.offset = offset


class InvalidAbsoluteLocation(CursorBufferError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid absolute index {index}")
        self.index = index


class DeletingTooMuch(CursorBufferError):
    def __init__(self) -> None:
        super().__init__("Deleting past end of buffer")


@dataclass(frozen=True)
class Abs:
    """Absolute position in the buffer."""

    index: int

    def __add__(self, other: Abs | Rel) -> Abs:
        if isinstance(other, Abs):
            return Abs(self.index + other.index)
        if isinstance(other, Rel):
            return Abs(self.index + other.offset)
        return NotImplemented


@dataclass(frozen=True)
class Rel:
    """Position relative to the cursor."""

    offset: int

    def __add__(self, other: Abs | Rel) -> Abs | Rel:
        if isinstance(other, Abs):
            return Abs(self.offset + other.index)
        if isinstance(other, Rel):
            return Rel(self.offset + other.offset)
        return NotImplemented


def cursor() -> Rel:
    """Location at the cursor."""
    return Rel(0)


def before() -> Rel:
    """Location just before the cursor."""
    return Rel(-1)


def after() -> Rel:
    """Location just after the cursor."""
    return Rel(1)


def front() -> Abs:
    """Location at the start of the buffer."""
    return Abs(0)


def back(cb: CursorBuffer) -> Abs:
    """Location at the end of the buffer."""
    return Abs(len(cb))


def find(
    cb: CursorBuffer, start: Abs | Rel, predicate: Callable[[str], bool]
) -> Abs | Rel | None:
    """Location of the next character from ``start`` matching ``predicate``."""
    for i, ch in enumerate(cb.chars(start)):
        if predicate(ch):
            return start + Rel(i)
    return None


def find_char(cb: CursorBuffer, start: Abs | Rel, c: str) -> Abs | Rel | None:
    return find(cb, start, lambda ch: ch == c)


def find_back(
    cb: CursorBuffer, start: Abs | Rel, predicate: Callable[[str], bool]
) -> Abs | Rel | None:
    """Location of the previous character before ``start`` matching ``predicate``."""
    index = cb.to_absolute(start)
    for i, ch in enumerate(reversed(cb.slice(0, index))):
        if predicate(ch):
            return start + Rel(-(i + 1))
    return None


def find_char_back(cb: CursorBuffer, start: Abs | Rel, c: str) -> Abs | Rel | None:
    return find_back(cb, start, lambda ch: ch == c)


class CursorBuffer:
    """Text with a cursor that always sits between characters (0..=len)."""

    __slots__ = ("_data", "_cursor")

    def __init__(self, text: str = "") -> None:
        self._data = text
        self._cursor = 0

    @classmethod
    def from_text(cls, text: str) -> CursorBuffer:
        return cls(text)

    @property
    def cursor(self) -> int:
        return self._cursor

    def move_cursor(self, loc: Abs | Rel) -> None:
        self._cursor = self.to_absolute(loc)

    def insert(self, loc: Abs | Rel, text: str) -> None:
        """Insert text and move the cursor to just after it."""
        index = self.to_absolute(loc)
        self._data = self._data[:index] + text + self._data[index:]
        self.move_cursor(loc)
        self.move_cursor(Rel(len(text)))

    def insert_inplace(self, loc: Abs | Rel, text: str) -> None:
        """Overwrite text at ``loc`` without moving the cursor."""
        index = self.to_absolute(loc)
        if index + len(text) > len(self._data):
            raise DeletingTooMuch()
        self._data = self._data[:index] + text + self._data[index + len(text):]

    def delete(self, start: Abs | Rel, end: Abs | Rel) -> None:
        """Delete the text between two locations; the cursor goes to its start."""
        lo, hi = self._location_range(start, end)
        self._data = self._data[:lo] + self._data[hi:]
        self.move_cursor(Abs(lo))

    def delete_before(self, start: Abs | Rel, end: Abs | Rel) -> None:
        self.delete(end, start)

    def _location_range(self, start: Abs | Rel, end: Abs | Rel) -> tuple[int, int]:
        a = self.to_absolute(start)
        b = self.to_absolute(end)
        return (a, b) if a <= b else (b, a)

    def location_slice(self, start: Abs | Rel, end: Abs | Rel) -> str:
        lo, hi = self._location_range(start, end)
        return self._data[lo:hi]

    def clear(self) -> None:
        self._data = ""
        self._cursor = 0

    def slice(self, start: int | None = None, stop: int | None = None) -> str:
        """Characters in ``start..stop``; raises IndexError when out of bounds."""
        lo = 0 if start is None else start
        hi = len(self._data) if stop is None else stop
        if lo < 0 or hi > len(self._data) or lo > hi:
            raise IndexError(f"slice {lo}..{hi} out of bounds for length {len(self._data)}")
        return self._data[lo:hi]

    def chars(self, loc: Abs | Rel) -> Iterator[str]:
        return iter(self._data[self.to_absolute(loc):])

    def is_empty(self) -> bool:
        return not self._data

    def char_at(self, loc: Abs | Rel) -> str | None:
        try:
            index = self.to_absolute(loc)
        except CursorBufferError:
            return None
        return self._data[index] if index < len(self._data) else None

    def to_absolute(self, loc: Abs | Rel) -> int:
        """Convert a location to an index, checking it is a valid cursor position."""
        if isinstance(loc, Abs):
            if self._in_bounds(loc.index):
                return loc.index
            raise InvalidAbsoluteLocation(loc.index)
        index = self._cursor + loc.offset
        if self._in_bounds(index):
            return index
        raise InvalidRelativeLocation(loc.offset)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index <= len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"CursorBuffer({self._data!r}, cursor={self._cursor})"
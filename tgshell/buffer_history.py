"""Undo and redo history for the line being edited."""

from __future__ import annotations

from typing import NamedTuple

from tgshell.cursor_buffer import Abs, CursorBuffer, cursor


class _HistItem(NamedTuple):
    text: str
    cursor: int


class DefaultBufferHistory:
    """Linear undo history of buffer contents and cursor positions."""

    def __init__(self) -> None:
        self._hist: list[_HistItem] = [_HistItem("", 0)]
        self._index = 0

    def _update_buffer(self, cb: CursorBuffer) -> None:
        item = self._hist[self._index]
        cb.clear()
        cb.insert(cursor(), item.text)
        cb.move_cursor(Abs(item.cursor))

    def next(self, cb: CursorBuffer) -> None:
        """Redo: restore the next recorded state."""
        if self._index < len(self._hist) - 1:
            self._index += 1
            self._update_buffer(cb)

    def prev(self, cb: CursorBuffer) -> None:
        """Undo: restore the previous recorded state."""
        if self._index > 0:
            self._index -= 1
            self._update_buffer(cb)

    def add(self, cb: CursorBuffer) -> None:
        """Record the buffer's state if it differs from the last one."""
        # A change made while undoing drops everything after the current state.
        if self._hist and self._index != len(self._hist):
            del self._hist[self._index + 1:]
        text = str(cb)
        if self._hist and self._hist[-1].text == text:
            return
        self._hist.append(_HistItem(text, cb.cursor))
        self._index += 1

    def clear(self) -> None:
        """Forget all recorded changes."""
        del self._hist[1:]
        self._index = 0
"""Vi motions and actions executed on a cursor buffer."""

from __future__ import annotations

from enum import Enum

from tgshell.cursor_buffer import (
    Abs,
    CursorBuffer,
    CursorBufferError,
    Rel,
    after,
    back,
    before,
    cursor,
    find,
    find_back,
    find_char,
    front,
)
from tgshell.vi_ast import (
    Action,
    Chain,
    Delete,
    Find,
    Insert,
    LowerCase,
    Motion,
    MotionLike,
    Move,
    Paste,
    ToggleCase,
    UpperCase,
    Yank,
)

_PUNCTUATION = '!-~*|".?[]{}()'

_CURSOR_MOTIONS = frozenset(
    {
        Motion.LEFT,
        Motion.RIGHT,
        Motion.START,
        Motion.END,
        Motion.WORD,
        Motion.WORD_PUNC,
        Motion.BACK_WORD,
    }
)


class LineMode(Enum):
    """Operating mode of the line editor."""

    INSERT = "insert"
    NORMAL = "normal"


class MemoryClipboard:
    """Clipboard kept in memory."""

    def __init__(self, text: str | None = None) -> None:
        self._text = text

    def get_text(self) -> str:
        if self._text is None:
            raise LookupError("clipboard is empty")
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text


_default_clipboard = MemoryClipboard()


def _moves_cursor(motion: MotionLike) -> bool:
    return isinstance(motion, Find) or motion in _CURSOR_MOTIONS


def motion_to_loc(cb: CursorBuffer, motion: MotionLike) -> Abs | Rel:
    """Location the cursor would reach by following ``motion``."""
    if isinstance(motion, Find):
        # When already on the searched character, look from the next one.
        start = after() if cb.char_at(cursor()) == motion.char else cursor()
        return find_char(cb, start, motion.char) or cursor()
    if motion is Motion.LEFT:
        return before()
    if motion is Motion.RIGHT:
        return after()
    if motion is Motion.START:
        return front()
    if motion is Motion.END:
        return back(cb)
    if motion is Motion.WORD:
        cur_char = cb.char_at(cursor())
        if cur_char is None:
            return cursor()
        if not cur_char.isspace():
            start = find(cb, cursor(), str.isspace) or back(cb)
        else:
            start = cursor()
        return find(cb, start, lambda ch: not ch.isspace()) or back(cb)
    if motion is Motion.WORD_PUNC:
        cur_char = cb.char_at(cursor())
        if cur_char is None:
            return cursor()
        if cur_char.isspace():
            start = cursor()
        elif cur_char in _PUNCTUATION:
            start = find(cb, cursor(), lambda ch: ch not in _PUNCTUATION) or back(cb)
        else:
            start = find(
                cb, cursor(), lambda ch: ch.isspace() or ch in _PUNCTUATION
            ) or back(cb)
        return find(cb, start, lambda ch: not ch.isspace()) or back(cb)
    if motion is Motion.BACK_WORD:
        cur_char = cb.char_at(cursor())
        if cur_char is not None and cur_char.isspace():
            offset = find_back(cb, cursor(), lambda ch: not ch.isspace()) or front()
        else:
            prev_char = cb.char_at(before())
            if prev_char is not None and prev_char.isspace():
                offset = find_back(cb, before(), lambda ch: not ch.isspace()) or front()
            else:
                offset = cursor()
        found = find_back(cb, offset, str.isspace)
        if found is None:
            return front()
        return found + after()
    return cursor()


def execute_vi(
    cb: CursorBuffer, action: Action, clipboard: MemoryClipboard | None = None
) -> LineMode:
    """Run ``action`` on ``cb`` and return the mode the editor should be in."""
    board = clipboard if clipboard is not None else _default_clipboard

    if isinstance(action, Insert):
        return LineMode.INSERT
    if isinstance(action, Move):
        if _moves_cursor(action.motion):
            cb.move_cursor(motion_to_loc(cb, action.motion))
    elif isinstance(action, Delete):
        if action.motion is Motion.ALL:
            cb.clear()
        elif _moves_cursor(action.motion):
            cb.delete(cursor(), motion_to_loc(cb, action.motion))
    elif isinstance(action, Chain):
        execute_vi(cb, action.first, board)
        return execute_vi(cb, action.second, board)
    elif isinstance(action, ToggleCase):
        loc = Rel(0)
        ch = cb.char_at(loc)
        if ch is not None:
            cb.insert_inplace(loc, ch.lower() if ch.isupper() else ch.upper())
    elif isinstance(action, Paste):
        loc = motion_to_loc(cb, action.motion)
        try:
            cb.to_absolute(loc)
        except CursorBufferError:
            loc = Rel(0)
        cb.insert(loc, board.get_text())
    elif isinstance(action, Yank):
        board.set_text(cb.location_slice(cursor(), motion_to_loc(cb, action.motion)))
    elif isinstance(action, (UpperCase, LowerCase)):
        loc = motion_to_loc(cb, action.motion)
        selected = cb.location_slice(cursor(), loc)
        selected = selected.upper() if isinstance(action, UpperCase) else selected.lower()
        target = cursor() if cb.to_absolute(loc) > cb.to_absolute(cursor()) else loc
        cb.insert_inplace(target, selected)
    return LineMode.NORMAL
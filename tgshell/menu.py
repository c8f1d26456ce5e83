"""Selection menu for completions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from tgshell.completion import Completion

MenuItem = tuple[str, Completion]
SortKey = Callable[[MenuItem], object]

_RESET = "\x1b[0m"
_SELECTED = "\x1b[47m\x1b[30m"
_COMMENT = "\x1b[33m"


def _move_down(n: int) -> str:
    return f"\x1b[{n}B"


def _move_up(n: int) -> str:
    return f"\x1b[{n}A"


def _move_to_column(column: int) -> str:
    return f"\x1b[{column + 1}G"


def _alphabetical(item: MenuItem) -> str:
    return item[0].lower()


def truncate(s: str, max_chars: int) -> str:
    """Cut ``s`` to ``max_chars`` characters, ending it with an ellipsis."""
    if len(s) <= max_chars:
        return s
    return s[: max(max_chars - 3, 0)] + "..."


class DefaultMenu:
    """Menu of (preview, completion) entries laid out in columns."""

    def __init__(
        self,
        limit: int = 20,
        sort_key: SortKey = _alphabetical,
        column_padding: int = 2,
        comment_max_length: int = 30,
    ) -> None:
        self._selections: list[MenuItem] = []
        self._cursor = 0
        self._active = False
        self.limit = limit
        self.sort_key = sort_key
        self.column_padding = column_padding
        self.comment_max_length = comment_max_length

    @property
    def cursor(self) -> int:
        """Index of the selected entry."""
        return self._cursor

    def next(self) -> None:
        """Select the next entry, wrapping to the first."""
        if self._cursor == max(len(self._selections) - 1, 0):
            self._cursor = 0
        else:
            self._cursor += 1

    def previous(self) -> None:
        """Select the previous entry, wrapping to the last."""
        if self._cursor == 0:
            self._cursor = max(len(self._selections) - 1, 0)
        else:
            self._cursor -= 1

    def accept(self) -> Completion | None:
        """Close the menu and return the selected completion."""
        self.deactivate()
        return self.current_selection()

    def current_selection(self) -> Completion | None:
        if 0 <= self._cursor < len(self._selections):
            return self._selections[self._cursor][1]
        return None

    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """Open the menu, unless it has no entries."""
        self._active = bool(self._selections)

    def deactivate(self) -> None:
        self._active = False

    def items(self) -> list[MenuItem]:
        return list(self._selections)

    def set_items(self, items: Iterable[MenuItem]) -> None:
        """Replace the entries, sorting them and resetting the selection."""
        self._selections = sorted(items, key=self.sort_key)
        self._cursor = 0

    def max_width(self) -> int:
        """Width of the widest entry, including its comment."""
        widest = 0
        for preview, completion in self._selections:
            comment_len = 0
            if completion.comment is not None:
                # Four extra columns for the formatting around the comment.
                comment_len = min(len(completion.comment), self.comment_max_length) + 4
            widest = max(widest, len(preview) + comment_len)
        return widest

    def _rows_needed(self, term_width: int) -> int:
        max_width = self.max_width()
        columns = term_width // max_width if max_width else 1
        # Terminal too narrow for even one entry per row.
        columns = max(columns, 1)
        return -(-len(self._selections) // columns)

    def required_lines(self, term_width: int) -> int:
        """Lines the menu takes up at the given terminal width."""
        return self._rows_needed(term_width) + 1

    def render(self, out: TextIO, term_width: int) -> None:
        """Write the menu below the current line to ``out``."""
        rows = self._rows_needed(term_width)
        if rows == 0:
            return
        max_width = self.max_width()
        column_start = 0

        out.write(_RESET)
        for first in range(0, len(self._selections), rows):
            column = self._selections[first:first + rows]
            for offset, (preview, completion) in enumerate(column):
                out.write(_move_down(1))
                out.write(_move_to_column(column_start))
                if self._cursor == first + offset:
                    out.write(_SELECTED)
                out.write(preview)
                out.write(_RESET)

                if completion.comment is not None:
                    comment_len = min(len(completion.comment), self.comment_max_length)
                    # Two columns for the parentheses.
                    out.write(_move_to_column(column_start + max_width - comment_len - 2))
                    out.write("(")
                    out.write(_COMMENT)
                    out.write(truncate(completion.comment, comment_len))
                    out.write(_RESET)
                    out.write(")")
            column_start += max_width + self.column_padding
            out.write(_move_up(len(column)))
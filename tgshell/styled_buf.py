"""Text with a style attached to every character, ready for the terminal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from wcwidth import wcwidth


class Color(Enum):
    """Terminal colours."""

    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


class Attribute(Enum):
    """Terminal text attributes."""

    RESET = "reset"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    SLOW_BLINK = "slow_blink"
    RAPID_BLINK = "rapid_blink"
    REVERSE = "reverse"
    HIDDEN = "hidden"
    CROSSED_OUT = "crossed_out"


@dataclass(frozen=True)
class Style:
    """Foreground, background and attributes of a piece of text."""

    foreground: Color | None = None
    background: Color | None = None
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    def with_foreground(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> Style:
        return replace(self, background=color)

    def with_attribute(self, attribute: Attribute) -> Style:
        return replace(self, attributes=self.attributes | {attribute})


@dataclass(frozen=True)
class StyledSpan:
    """A run of text sharing one style."""

    style: Style
    content: str


def _display_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


class StyledBuf:
    """A string where each character carries its own style."""

    __slots__ = ("content", "_styles")

    def __init__(self, content: str = "", style: Style = Style()) -> None:
        self.content = ""
        self._styles: list[Style] = []
        self.push(content, style)

    @classmethod
    def empty(cls) -> StyledBuf:
        return cls()

    @classmethod
    def concat(cls, parts: Iterable[StyledBuf]) -> StyledBuf:
        """Join several buffers into one."""
        buf = cls()
        for part in parts:
            buf.push_buf(part)
        return buf

    @classmethod
    def _from_parts(cls, content: str, styles: list[Style]) -> StyledBuf:
        buf = cls()
        buf.content = content
        buf._styles = list(styles)
        return buf

    def push(self, content: str, style: Style) -> None:
        self.content += content
        self._styles.extend(style for _ in content)

    def lines(self) -> list[list[StyledSpan]]:
        """Split into lines of one-character spans; newlines are dropped."""
        result = []
        i = 0
        for line in self.content.split("\n"):
            spans = []
            for ch in line:
                spans.append(StyledSpan(self._styles[i], ch))
                i += 1
            i += 1
            result.append(spans)
        return result

    def spans(self) -> list[StyledSpan]:
        return [StyledSpan(style, ch) for ch, style in zip(self.content, self._styles)]

    def count_newlines(self) -> int:
        return self.content.count("\n")

    def content_len(self) -> int:
        """Number of terminal columns the content takes up."""
        return _display_width(self.content)

    def apply_style_at(self, index: int, style: Style) -> None:
        if index < 0 or index >= len(self._styles):
            raise IndexError(f"style index {index} out of range")
        self._styles[index] = style

    def apply_styles_in_range(self, start: int, end: int, style: Style) -> None:
        for index in range(start, end):
            self.apply_style_at(index, style)

    def slice_from(self, start: int) -> StyledBuf:
        if start >= len(self.content):
            return StyledBuf.empty()
        return StyledBuf._from_parts(self.content[start:], self._styles[start:])

    def push_buf(self, buf: StyledBuf) -> None:
        self.content += buf.content
        self._styles.extend(buf._styles)

    def with_color(self, color: Color) -> StyledBuf:
        return StyledBuf._from_parts(
            self.content, [s.with_foreground(color) for s in self._styles]
        )

    def on(self, color: Color) -> StyledBuf:
        return StyledBuf._from_parts(
            self.content, [s.with_background(color) for s in self._styles]
        )

    def attribute(self, attribute: Attribute) -> StyledBuf:
        return StyledBuf._from_parts(
            self.content, [s.with_attribute(attribute) for s in self._styles]
        )

    def apply_styles(self, style: Style) -> StyledBuf:
        return StyledBuf._from_parts(self.content, [style] * len(self._styles))

    def __str__(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledBuf):
            return NotImplemented
        return self.content == other.content and self._styles == other._styles

    def __repr__(self) -> str:
        return f"StyledBuf({self.content!r})"


def _to_styled_buf(part: object) -> StyledBuf:
    if part is None:
        return StyledBuf.empty()
    if isinstance(part, StyledBuf):
        return part
    if isinstance(part, StyledSpan):
        return StyledBuf(part.content, part.style)
    if isinstance(part, str):
        return StyledBuf(part)
    raise TypeError(f"cannot convert {type(part).__name__} to StyledBuf")


def styled(*args: object) -> StyledBuf:
    """Compose a buffer from strings, spans, buffers and ``None`` values."""
    return StyledBuf.concat(_to_styled_buf(arg) for arg in args)


def line_content_len(line: Iterable[StyledSpan]) -> int:
    """Terminal width of a line made of spans."""
    return _display_width("".join(span.content for span in line))
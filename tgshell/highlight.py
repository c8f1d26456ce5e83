"""Syntax highlighting of the input line."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from tgshell.styled_buf import Color, Style, StyledBuf


class _SyntaxTheme(Protocol):
    def apply(self, buf: StyledBuf) -> None: ...


@dataclass
class DefaultHighlighter:
    """Colours the whole line green."""

    style: Style = field(default_factory=Style)

    def highlight(self, buf: str) -> StyledBuf:
        return StyledBuf(buf, Style(foreground=Color.GREEN))


class SyntaxHighlighter:
    """Starts from a base style and lets each theme restyle parts of the line."""

    def __init__(
        self, auto: Style = Style(), themes: Iterable[_SyntaxTheme] = ()
    ) -> None:
        self.auto = auto
        self.syntax_themes: list[_SyntaxTheme] = list(themes)

    def push_rule(self, theme: _SyntaxTheme) -> None:
        self.syntax_themes.append(theme)

    def highlight(self, buf: str) -> StyledBuf:
        styled_buf = StyledBuf(buf, self.auto)
        for theme in self.syntax_themes:
            theme.apply(styled_buf)
        return styled_buf
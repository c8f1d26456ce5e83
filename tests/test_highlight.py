from tgshell.highlight import DefaultHighlighter, SyntaxHighlighter
from tgshell.styled_buf import Color, Style


class _RangeTheme:
    def __init__(self, start, end, style):
        self.start = start
        self.end = end
        self.style = style

    def apply(self, buf):
        buf.apply_styles_in_range(self.start, self.end, self.style)


def test_default_highlighter_colours_everything_green():
    result = DefaultHighlighter().highlight("echo hi")
    assert result.content == "echo hi"
    assert all(span.style.foreground is Color.GREEN for span in result.spans())


def test_default_highlighter_empty_input():
    result = DefaultHighlighter().highlight("")
    assert result.content == ""
    assert result.spans() == []


def test_syntax_highlighter_without_themes_uses_auto_style():
    auto = Style(foreground=Color.CYAN)
    result = SyntaxHighlighter(auto).highlight("ls -l")
    assert result.content == "ls -l"
    assert {span.style for span in result.spans()} == {auto}


def test_theme_restyles_range():
    cmd_style = Style(foreground=Color.BLUE)
    highlighter = SyntaxHighlighter(themes=[_RangeTheme(0, 2, cmd_style)])
    spans = highlighter.highlight("ls -l").spans()
    assert [span.style for span in spans[:2]] == [cmd_style, cmd_style]
    assert all(span.style == Style() for span in spans[2:])


def test_push_rule_applies_after_existing_themes():
    first = Style(foreground=Color.BLUE)
    second = Style(foreground=Color.YELLOW)
    highlighter = SyntaxHighlighter(themes=[_RangeTheme(0, 4, first)])
    highlighter.push_rule(_RangeTheme(2, 4, second))
    spans = highlighter.highlight("abcd").spans()
    assert [span.style for span in spans] == [first, first, second, second]
    assert len(highlighter.syntax_themes) == 2
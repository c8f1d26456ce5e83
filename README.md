# tgshell

Building blocks for an interactive command shell. Each module can be used on
its own.

| Module | What it holds |
| --- | --- |
| `tgshell.cursor_buffer` | `CursorBuffer`, a text buffer with a cursor. Positions are absolute (`Abs`) or relative to the cursor (`Rel`), and each one is checked against the bounds of the buffer. |
| `tgshell.vi_ast` | Vi commands as data: `Motion`, `Find`, and actions such as `Move`, `Delete`, `Yank`, `Paste`, `UpperCase`, `LowerCase`, `ToggleCase`, `Insert` and `Chain`. |
| `tgshell.vi` | `motion_to_loc` and `execute_vi`, which apply those commands to a `CursorBuffer`. Also `LineMode` and an in-memory `MemoryClipboard`. |
| `tgshell.buffer_history` | `DefaultBufferHistory`, for undo (`prev`) and redo (`next`) of buffer states. |
| `tgshell.completion` | `Completion`, `ReplaceMethod`, `CompletionCtx`, the formatters `default_format` and `default_format_with_comment`, and predicates such as `cmdname_pred`, `arg_pred`, `cmdname_eq_pred`, `git_pred`, `flag_pred`, `short_flag_pred` and `long_flag_pred`. |
| `tgshell.completion_paths` | File-system helpers: `filepaths`, `find_executables_in_path`, `drop_path_end` and `to_absolute` (which expands `~/`). |
| `tgshell.styled_buf` | `StyledBuf`, text with a `Style` for each character. Also `Color`, `Attribute`, `StyledSpan`, the `styled(...)` composer and `line_content_len`. |
| `tgshell.highlight` | `DefaultHighlighter`, which colours the whole line green, and `SyntaxHighlighter`, which runs a list of themes over the line. |
| `tgshell.menu` | `DefaultMenu`, a sorted, wrap-around selection menu that writes itself as ANSI escape sequences in columns. Also `truncate`. |
| `tgshell.process` | `BuiltinProcess`, `ExternalProcess`, `ProcessGroup`, `ProcessStatus`, `run_external_command` (starts a child in a process group) and `execute_and_capture_output`. |
| `tgshell.text_utils` | `longest_common_prefix` and `reverse_string`. |

## Installation

```
pip install tgshell
```

Install with the `test` extra to run the test suite:

```
pip install "tgshell[test]"
pytest
```

## Examples

### Editing a buffer

```python
from tgshell.cursor_buffer import Abs, CursorBuffer, cursor, front

cb = CursorBuffer()
cb.insert(cursor(), "hello world")   # the cursor ends up after the text
cb.delete(front(), Abs(6))           # the cursor moves to the start of the deleted text
print(cb.slice(0, 5))                # "world"
print(cb.cursor)                     # 0
```

A position outside the buffer raises `InvalidAbsoluteLocation` or
`InvalidRelativeLocation`. Both are subclasses of `CursorBufferError`.

### Vi motions and actions

```python
from tgshell.cursor_buffer import CursorBuffer
from tgshell.vi import MemoryClipboard, execute_vi
from tgshell.vi_ast import Motion, Move, Paste, Yank

cb = CursorBuffer.from_text("hello world goodbye world")
execute_vi(cb, Move(Motion.WORD))
print(cb.cursor)                     # 6

clipboard = MemoryClipboard()
execute_vi(cb, Yank(Motion.WORD), clipboard)
print(clipboard.get_text())          # "world "
execute_vi(cb, Paste(Motion.NONE), clipboard)
```

`execute_vi` returns the `LineMode` the editor should be in. It is `INSERT`
after an `Insert` action and `NORMAL` otherwise.

### Undo and redo

```python
from tgshell.buffer_history import DefaultBufferHistory
from tgshell.cursor_buffer import CursorBuffer, cursor

cb = CursorBuffer()
history = DefaultBufferHistory()
cb.insert(cursor(), "ls")
history.add(cb)
cb.insert(cursor(), " -la")
history.add(cb)
history.prev(cb)
print(str(cb))                       # "ls"
history.next(cb)
print(str(cb))                       # "ls -la"
```

### Completion values and predicates

```python
from tgshell.completion import CompletionCtx, default_format, flag_pred

ctx = CompletionCtx(["git", "--"])
print(ctx.cmd_name(), ctx.cur_word(), ctx.arg_num())   # git -- 1
print(flag_pred(ctx))                                  # True

for completion in default_format(["status", "add"]):
    print(repr(completion.accept()))                   # 'status ', 'add '
```

### Styled text and highlighting

```python
from tgshell.highlight import SyntaxHighlighter
from tgshell.styled_buf import Color, Style, StyledBuf, styled

prompt = styled("> ", StyledBuf("~", Style(foreground=Color.BLUE)), None)
print(prompt.content)                # "> ~"


class FirstWordTheme:
    def apply(self, buf):
        end = buf.content.find(" ")
        buf.apply_styles_in_range(0, end if end >= 0 else len(buf), Style(foreground=Color.BLUE))


highlighted = SyntaxHighlighter(themes=[FirstWordTheme()]).highlight("ls -la")
```

### A completion menu

```python
import sys

from tgshell.completion import default_format
from tgshell.menu import DefaultMenu

menu = DefaultMenu()
menu.set_items((c.preview(), c) for c in default_format(["commit", "add", "status"]))
menu.activate()
menu.next()
print(menu.current_selection().completion)   # "commit"
menu.render(sys.stdout, term_width=80)
```

### Running commands

```python
from tgshell.process import execute_and_capture_output, run_external_command

print(execute_and_capture_output("echo", ["hello"]))   # "hello\n"

process, pgid = run_external_command("sleep", ["1"], None, None, None, None)
print(process.try_wait())            # None while it is still running
print(process.wait())                # 0
```

A command that exits with a non-zero status makes
`execute_and_capture_output` raise `CommandFailedError`.

## What this package does not do

- There is no shell to run and no command-line entry point. The package
  provides parts, not a read–eval loop.
- The completion modules provide the values, the context and the
  predicates. They do not provide a rule engine or ready-made completion
  rules for particular commands.
- There is no job table. `tgshell.process` starts processes and reports
  their state. It does not keep track of foreground and background jobs.
- Nothing here reads or writes a configuration file. The package also does
  not produce inline suggestions.
- There is no key-event loop or terminal painter. `DefaultMenu.render` and
  `StyledBuf` produce output, and the caller decides where it goes.
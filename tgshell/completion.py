"""Completion values, the context they are computed from, and common predicates."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class ReplaceMethod(Enum):
    """How a completion is put into the line."""

    # Insert the value after the cursor.
    APPEND = "append"
    # Replace the word being typed.
    REPLACE = "replace"


@dataclass
class Completion:
    """A candidate value for completing the current word."""

    completion: str
    add_space: bool = True
    display: str | None = None
    replace_method: ReplaceMethod = ReplaceMethod.REPLACE
    comment: str | None = None

    def preview(self) -> str:
        """User-friendly text shown for this completion."""
        return self.display if self.display is not None else self.completion

    def accept(self) -> str:
        """Text actually inserted when the completion is accepted."""
        return self.completion + " " if self.add_space else self.completion


class CompletionCtx:
    """The line typed so far, split into words; the cursor is after the last one."""

    __slots__ = ("line",)

    def __init__(self, line: Sequence[str]) -> None:
        self.line = list(line)

    def cmd_name(self) -> str | None:
        """Name of the command, if any."""
        return self.line[0] if self.line else None

    def cur_word(self) -> str | None:
        """The word currently being typed, if any."""
        return self.line[-1] if self.line else None

    def arg_num(self) -> int:
        """Index of the argument being typed (0 is the command name)."""
        return max(len(self.line) - 1, 0)

    def __repr__(self) -> str:
        return f"CompletionCtx({self.line!r})"


def default_format(names: Iterable[str]) -> list[Completion]:
    """Turn plain strings into completions with default options."""
    return [Completion(completion=name) for name in names]


def default_format_with_comment(pairs: Iterable[tuple[str, str]]) -> list[Completion]:
    """Turn (value, comment) pairs into completions with default options."""
    return [Completion(completion=value, comment=comment) for value, comment in pairs]


def cmdname_pred(ctx: CompletionCtx) -> bool:
    """True when the command name itself is being completed."""
    return ctx.arg_num() == 0


def arg_pred(ctx: CompletionCtx) -> bool:
    """True when an argument is being completed."""
    return ctx.arg_num() != 0


def cmdname_eq_pred(cmd_name: str) -> Callable[[CompletionCtx], bool]:
    """Predicate checking that the command name equals ``cmd_name``."""

    def pred(ctx: CompletionCtx) -> bool:
        return ctx.cmd_name() == cmd_name

    return pred


def git_pred(ctx: CompletionCtx) -> bool:
    return cmdname_eq_pred("git")(ctx)


def long_flag_pred(ctx: CompletionCtx) -> bool:
    """True when a long flag (``--x``) is being completed."""
    return (ctx.cur_word() or "").startswith("--")


def short_flag_pred(ctx: CompletionCtx) -> bool:
    """True when a short flag (``-x``) is being completed."""
    return (ctx.cur_word() or "").startswith("-") and not long_flag_pred(ctx)


def flag_pred(ctx: CompletionCtx) -> bool:
    """True when any flag is being completed."""
    return long_flag_pred(ctx) or short_flag_pred(ctx)
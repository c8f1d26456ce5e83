"""Syntax tree for vi-style normal mode commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Motion(Enum):
    """Cursor motions that a command can act over."""

    NONE = "none"
    BACK_WORD = "back_word"
    WORD_PUNC = "word_punc"
    WORD = "word"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    UP = "up"
    DOWN = "down"
    END = "end"
    # Select the entire line (for a move this behaves like END).
    ALL = "all"


@dataclass(frozen=True)
class Find:
    """Motion to the next occurrence of a character."""

    char: str


MotionLike = Union[Motion, Find]


@dataclass(frozen=True)
class Undo:
    """Undo the last change."""


@dataclass(frozen=True)
class Redo:
    """Redo the last undone change."""


@dataclass(frozen=True)
class Insert:
    """Switch to insert mode."""


@dataclass(frozen=True)
class ToggleCase:
    """Toggle the case of the character under the cursor."""


@dataclass(frozen=True)
class Delete:
    motion: MotionLike


@dataclass(frozen=True)
class Yank:
    motion: MotionLike


@dataclass(frozen=True)
class Move:
    motion: MotionLike


@dataclass(frozen=True)
class Paste:
    motion: MotionLike


@dataclass(frozen=True)
class LowerCase:
    motion: MotionLike


@dataclass(frozen=True)
class UpperCase:
    motion: MotionLike


@dataclass(frozen=True)
class Chain:
    """Two actions run one after the other, left to right."""

    first: Action
    second: Action


Action = Union[
    Undo,
    Redo,
    Insert,
    ToggleCase,
    Delete,
    Yank,
    Move,
    Paste,
    LowerCase,
    UpperCase,
    Chain,
]


@dataclass(frozen=True)
class Command:
    """An action with a repeat count."""

    action: Action
    repeat: int = 1
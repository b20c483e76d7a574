"""Logical reveal position within a text and its transition table.

Nothing here touches the terminal. A cursor state ``(k, w)`` means lines
``0..k-1`` have been revealed in full and, when ``w > 0``, the first ``w``
words of line ``k`` are revealed as well. ``k == line_count`` is the
exhausted state.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional

from .model import Text


class NavCommand(Enum):
    FROM_BEGINNING = "from_beginning"
    PREV_LINE = "prev_line"
    NEXT_LINE = "next_line"
    NEXT_WORD = "next_word"


class TransitionKind(Enum):
    """What a single navigation step did."""
    NOOP = "noop"
    RESET = "reset"
    REVEAL_LINE = "reveal_line"        # whole hidden line shown at once
    FINALIZE_LINE = "finalize_line"    # rest of a partly revealed line shown
    PASS_LINE = "pass_line"            # fully word-revealed line left behind
    REVEAL_WORD = "reveal_word"        # next word on the same line
    CROSS_LINE = "cross_line"          # first word of a new line
    EXHAUST = "exhaust"                # word reveal ran off the last line
    RETREAT = "retreat"


@dataclass(frozen=True)
class NavigationCursor:
    line_index: int = 0
    word_index: int = 0
    last_command: Optional[NavCommand] = None

    @property
    def position(self) -> tuple[int, int]:
        return (self.line_index, self.word_index)

    def is_exhausted(self, text: Text) -> bool:
        return self.line_index >= text.line_count

    def is_mid_reveal(self, text: Text) -> bool:
        line = text.line_at(self.line_index)
        return line is not None and 0 < self.word_index < line.word_count

    def revealed_lines(self) -> int:
        """Number of rows holding revealed content."""
        return self.line_index + (1 if self.word_index > 0 else 0)

    def active_row(self) -> int:
        """1-indexed terminal row of the line currently in focus."""
        if self.word_index > 0:
            return self.line_index + 1
        return max(self.line_index, 1)


class Transition(NamedTuple):
    before: NavigationCursor
    after: NavigationCursor
    kind: TransitionKind
    command: NavCommand

    @property
    def changed(self) -> bool:
        return self.kind is not TransitionKind.NOOP


def step(cursor: NavigationCursor, command: NavCommand, text: Text) -> Transition:
    """Apply one command to a cursor and describe the result.

    Pure function: the input cursor is never modified. No-ops return the
    very same cursor object.
    """
    if command is NavCommand.FROM_BEGINNING:
        return Transition(cursor, NavigationCursor(), TransitionKind.RESET, command)

    if command is NavCommand.PREV_LINE:
        if cursor.line_index == 0:
            return _noop(cursor, command)
        after = NavigationCursor(cursor.line_index - 1, 0, command)
        return Transition(cursor, after, TransitionKind.RETREAT, command)

    line = text.line_at(cursor.line_index)
    if line is None:
        # Exhausted: nothing more to show
        return _noop(cursor, command)

    if command is NavCommand.NEXT_LINE:
        if cursor.word_index == 0:
            kind = TransitionKind.REVEAL_LINE
        elif cursor.is_mid_reveal(text):
            kind = TransitionKind.FINALIZE_LINE
        else:
            kind = TransitionKind.PASS_LINE
        after = NavigationCursor(cursor.line_index + 1, 0, command)
        return Transition(cursor, after, kind, command)

    if command is NavCommand.NEXT_WORD:
        if cursor.word_index == 0:
            after = replace(cursor, word_index=1, last_command=command)
            return Transition(cursor, after, TransitionKind.CROSS_LINE, command)
        if cursor.word_index < line.word_count:
            after = replace(cursor, word_index=cursor.word_index + 1, last_command=command)
            return Transition(cursor, after, TransitionKind.REVEAL_WORD, command)
        # Line boundary: the next word is the first word of the following line
        next_index = cursor.line_index + 1
        if text.line_at(next_index) is None:
            after = NavigationCursor(next_index, 0, command)
            return Transition(cursor, after, TransitionKind.EXHAUST, command)
        after = NavigationCursor(next_index, 1, command)
        return Transition(cursor, after, TransitionKind.CROSS_LINE, command)

    raise ValueError(f"Unknown navigation command: {command!r}")


def _noop(cursor: NavigationCursor, command: NavCommand) -> Transition:
    return Transition(cursor, cursor, TransitionKind.NOOP, command)

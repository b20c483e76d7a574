"""Render engine: applies navigation commands and redraws the transcript.

The screen always shows exactly what the navigation cursor says has been
revealed: line ``i`` lives on terminal row ``i + 1``. All row movement goes
through :meth:`ScreenCursor.advance_row` and
:meth:`ScreenCursor.retreat_row`, one row at a time.
"""

import logging
from typing import Callable, Optional

from .model import Text, WORD_SEPARATOR
from .navigation import NavCommand, NavigationCursor, Transition, TransitionKind, step
from .screen import ScreenCursor, Style

logger = logging.getLogger(__name__)


class RenderEngine:
    """Owns the active text together with its logical and physical cursors."""

    def __init__(self, screen: ScreenCursor, text: Optional[Text] = None):
        self.screen = screen
        self.text = text if text is not None else Text()
        self.cursor = NavigationCursor()
        self._renderers: dict[TransitionKind, Callable[[Transition], None]] = {
            TransitionKind.NOOP: self._render_noop,
            TransitionKind.RESET: self._render_reset,
            TransitionKind.REVEAL_LINE: self._render_reveal_line,
            TransitionKind.FINALIZE_LINE: self._render_finalize_line,
            TransitionKind.PASS_LINE: self._render_noop,
            TransitionKind.REVEAL_WORD: self._render_reveal_word,
            TransitionKind.CROSS_LINE: self._render_cross_line,
            TransitionKind.EXHAUST: self._render_noop,
            TransitionKind.RETREAT: self._render_retreat,
        }

    def load(self, text: Text) -> None:
        """Replace the active text and start over on a blank screen."""
        self.text = text
        self.cursor = NavigationCursor()
        self.screen.reset()
        self.screen.flush()
        logger.info("Loaded text with %d lines", text.line_count)

    @property
    def exhausted(self) -> bool:
        return self.cursor.is_exhausted(self.text)

    def apply(self, command: NavCommand) -> Transition:
        """Run one command: transition, draw, then flush exactly once."""
        transition = step(self.cursor, command, self.text)
        self._renderers[transition.kind](transition)
        self.cursor = transition.after
        self.screen.flush()
        assert self.screen.row == self.cursor.active_row(), (
            f"screen row {self.screen.row} out of sync with {self.cursor.position}")
        if transition.changed:
            logger.debug("%s: %s -> %s (%s)", command.name, transition.before.position,
                         transition.after.position, transition.kind.value)
        else:
            logger.debug("%s ignored at %s", command.name, transition.before.position)
        return transition

    # --- drawing -----------------------------------------------------------

    def _line(self, index: int) -> str:
        # Transitions only ever name valid lines; "" keeps drawing total anyway
        line = self.text.line_string(index)
        return "" if line is None else line

    def _leave_row(self, transition: Transition) -> None:
        """Neutralize the active row, then step down to the next one."""
        if transition.before.active_row() == transition.after.active_row():
            return
        self.screen.rewrite_row(self._line(transition.before.active_row() - 1), Style.NEUTRAL)
        self.screen.advance_row()

    def _render_noop(self, transition: Transition) -> None:
        pass

    def _render_reset(self, transition: Transition) -> None:
        self.screen.reset()

    def _render_reveal_line(self, transition: Transition) -> None:
        self._leave_row(transition)
        self.screen.rewrite_row(self._line(transition.before.line_index), Style.HIGHLIGHTED)

    def _render_finalize_line(self, transition: Transition) -> None:
        # Show the words that were still hidden; nothing is skipped
        self.screen.rewrite_row(self._line(transition.before.line_index), Style.NEUTRAL)

    def _render_reveal_word(self, transition: Transition) -> None:
        line_index, word_index = transition.before.position
        prefix = self.text.partial_line(line_index, word_index) + WORD_SEPARATOR
        word = self.text.word_at(line_index, word_index)
        self.screen.rewrite_row_partial(prefix, word, Style.NEUTRAL, Style.HIGHLIGHTED)

    def _render_cross_line(self, transition: Transition) -> None:
        self._leave_row(transition)
        word = self.text.word_at(transition.after.line_index, 0)
        self.screen.rewrite_row_partial("", word, Style.NEUTRAL, Style.HIGHLIGHTED)

    def _render_retreat(self, transition: Transition) -> None:
        """Hide every row that is no longer revealed, moving up as we go."""
        shown = transition.before.revealed_lines()
        keep = transition.after.revealed_lines()
        for _ in range(shown - keep):
            self.screen.clear_row()
            if self.screen.row > max(keep, 1):
                self.screen.retreat_row()
        if keep > 0:
            self.screen.rewrite_row(self._line(keep - 1), Style.HIGHLIGHTED)

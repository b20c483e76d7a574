"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import termios
from typing import Optional

import blessed

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Owns terminal modes: fullscreen, cursor visibility and raw input."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode, hide the cursor and start raw input."""
        print(self.term.enter_fullscreen + self.term.hide_cursor + self.term.clear,
              end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input  # type: ignore
            try:
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
            except (termios.error, OSError) as e:
                # Not a TTY (pipes, CI); keep running without key input
                logger.warning(f"Could not enter raw input mode: {e}")
                self._curtsies_input = None

    def cleanup(self):
        """Leave raw input, exit fullscreen and show the cursor again."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except (termios.error, OSError) as e:
                # Teardown must not crash; the process is exiting anyway
                logger.warning(f"Could not leave raw input mode: {e}")
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def draw_message(self, lines: list[str], status: str = ""):
        """Clear the screen and show lines from the top, plus a status line."""
        out = [self.term.home + self.term.clear]
        for y, line in enumerate(lines):
            out.append(self.term.move(y, 0) + line)
        if status:
            out.append(self.term.move(self.term.height - 1, 0) + status)
        print(''.join(out), end='', flush=True)

    def draw_prompt_input(self, row: int, text: str):
        """Redraw the prompt input on a 0-indexed row."""
        print(self.term.move(row, 0) + self.term.clear_eol + text, end='', flush=True)

    def get_key(self, timeout=None):
        """Block for the next key token, or return None without input."""
        if self._curtsies_input is None:
            return None
        evt = self._curtsies_input.send(timeout)  # type: ignore
        return None if evt is None else str(evt)

    @property
    def has_input(self) -> bool:
        return self._curtsies_input is not None

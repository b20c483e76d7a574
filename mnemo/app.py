"""Main application controller: menu, text prompt and the reveal loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .config import Settings
from .constants import AppConstants, AppMode
from .engine import RenderEngine
from .errors import TextNotFoundError
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .library import TextLibrary
from .screen import ScreenCursor
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Mnemo:
    """Single-threaded key loop owning the active text session."""

    def __init__(self, settings: Optional[Settings] = None,
                 terminal: Optional[TerminalInterface] = None):
        self.settings = settings or Settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.library = TextLibrary(self.settings.texts_dir)
        self.screen = ScreenCursor(self.terminal.term,
                                   highlight_color=self.settings.highlight_color)
        self.engine = RenderEngine(self.screen)
        self.command_registry = CommandRegistry()
        self.mode = AppMode.MENU
        self.running = False
        self.prompt_input = ""
        self.text_name: Optional[str] = None
        # Set when the app has to stop with an error; shown after teardown
        self.error_message: Optional[str] = None
        self.exit_status = 0

    def run(self, text_name: Optional[str] = None) -> int:
        """Run the key loop until quit; returns the process exit status.

        The terminal is restored on every way out, including Ctrl-C and a
        text that fails to load.
        """
        self.terminal.setup()
        self.running = True
        try:
            if text_name:
                self.open_text(text_name)
            else:
                self.show_main_menu()
            while self.running:
                key_event = self.keyboard.get_key_event()
                if key_event is None:
                    if not self.terminal.has_input:
                        logger.warning("No keyboard input available, stopping")
                        self.running = False
                    continue
                self._handle_key_event(key_event)
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.terminal.cleanup()
        if self.error_message:
            print(self.error_message)
        return self.exit_status

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event in the current mode."""
        if self.mode == AppMode.ENTERING_TEXT:
            self._handle_text_prompt(key_event)
            return
        if self.command_registry.execute(self, key_event):
            return
        if self.mode == AppMode.MENU:
            self.show_main_menu(AppConstants.UNHANDLED_KEY_MESSAGE)

    def _handle_text_prompt(self, key_event: KeyEvent):
        """Collect a text name; Enter confirms, Escape cancels."""
        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            name = self.prompt_input
            self.prompt_input = ""
            if name:
                self.open_text(name)
            else:
                self.show_main_menu()
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            self.prompt_input = ""
            self.show_main_menu()
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            if self.prompt_input:
                self.prompt_input = self.prompt_input[:-1]
                self.terminal.draw_prompt_input(AppConstants.PROMPT_INPUT_ROW, self.prompt_input)
        elif key_event.is_printable:
            self.prompt_input += key_event.value
            self.terminal.draw_prompt_input(AppConstants.PROMPT_INPUT_ROW, self.prompt_input)

    def show_main_menu(self, message: str = ""):
        self.mode = AppMode.MENU
        term = self.terminal.term
        lines = [f"{term.bold}{term.italic}{AppConstants.TITLE}{term.normal}"]
        lines.extend(AppConstants.MENU_LINES)
        self.terminal.draw_message(lines, status=message)

    def show_help(self):
        lines = [line.format(texts_dir=self.library.texts_dir) for line in AppConstants.HELP_LINES]
        self.terminal.draw_message(lines)

    def show_text_list(self):
        names = self.library.list_texts()
        if names:
            message = AppConstants.AVAILABLE_TEXTS_MESSAGE.format(", ".join(names))
        else:
            message = AppConstants.NO_TEXTS_MESSAGE.format(self.library.texts_dir)
        self.terminal.draw_message([message])

    def start_text_prompt(self):
        self.mode = AppMode.ENTERING_TEXT
        self.prompt_input = ""
        self.terminal.draw_message([AppConstants.ENTERING_TEXT_MESSAGE])

    def open_text(self, name: str) -> bool:
        """Load a text and start navigating it.

        A text that cannot be loaded stops the app with exit status 1; the
        reason is printed once the terminal has been restored.
        """
        try:
            text = self.library.load(name)
        except TextNotFoundError as e:
            logger.error(str(e))
            self.error_message = str(e)
            self.exit_status = 1
            self.running = False
            return False
        self.text_name = name
        self.mode = AppMode.NAVIGATING
        self.screen.footer = AppConstants.NAVIGATION_STATUS.format(name=name)
        self.engine.load(text)
        return True

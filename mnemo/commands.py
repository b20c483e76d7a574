"""Command pattern implementation for menu and navigation keys."""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, Tuple, Optional, TYPE_CHECKING
from .constants import AppConstants, AppMode
from .keyboard import KeyType
from .navigation import NavCommand

if TYPE_CHECKING:
    from .app import Mnemo
    from .keyboard import KeyEvent


class AppCommand(ABC):
    """Base class for commands bound to a key."""

    # Modes in which the binding is live
    modes: FrozenSet[AppMode] = frozenset()

    @abstractmethod
    def execute(self, app: 'Mnemo', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            app: Mnemo instance
            key_event: The key event that triggered this command
        """


class MenuCommand(AppCommand):
    modes = frozenset({AppMode.MENU})


class QuitCommand(AppCommand):
    modes = frozenset({AppMode.MENU, AppMode.NAVIGATING})

    def execute(self, app, key_event):
        app.running = False


class MainMenuCommand(AppCommand):
    modes = frozenset({AppMode.MENU, AppMode.NAVIGATING})

    def execute(self, app, key_event):
        app.show_main_menu()


class HelpCommand(MenuCommand):
    def execute(self, app, key_event):
        app.show_help()


class ListTextsCommand(MenuCommand):
    def execute(self, app, key_event):
        app.show_text_list()


class EnterTextCommand(MenuCommand):
    def execute(self, app, key_event):
        app.start_text_prompt()


class NavigateCommand(AppCommand):
    """Forward a navigation command to the render engine."""
    modes = frozenset({AppMode.NAVIGATING})

    def __init__(self, nav_command: NavCommand):
        self.nav_command = nav_command

    def execute(self, app, key_event):
        app.engine.apply(self.nav_command)


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], AppCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        self.register((KeyType.REGULAR, AppConstants.KEY_QUIT), QuitCommand())
        self.register((KeyType.REGULAR, AppConstants.KEY_HELP), HelpCommand())
        self.register((KeyType.REGULAR, AppConstants.KEY_LIST_TEXTS), ListTextsCommand())
        self.register((KeyType.REGULAR, AppConstants.KEY_ENTER_TEXT), EnterTextCommand())
        self.register((KeyType.REGULAR, AppConstants.KEY_MAIN_MENU), MainMenuCommand())

        self.register((KeyType.REGULAR, AppConstants.KEY_FROM_BEGINNING),
                      NavigateCommand(NavCommand.FROM_BEGINNING))
        self.register((KeyType.REGULAR, AppConstants.KEY_PREV_LINE),
                      NavigateCommand(NavCommand.PREV_LINE))
        self.register((KeyType.REGULAR, AppConstants.KEY_NEXT_LINE),
                      NavigateCommand(NavCommand.NEXT_LINE))
        self.register((KeyType.REGULAR, AppConstants.KEY_NEXT_WORD),
                      NavigateCommand(NavCommand.NEXT_WORD))

    def register(self, key: Tuple[KeyType, str], command: AppCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, mode: AppMode, key_type: KeyType, value: str) -> Optional[AppCommand]:
        """Get the command bound to a key, if it is live in the given mode."""
        command = self._commands.get((key_type, value))
        if command is None or mode not in command.modes:
            return None
        return command

    def execute(self, app: 'Mnemo', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command handled the key
        """
        command = self.get_command(app.mode, key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(app, key_event)
        return True

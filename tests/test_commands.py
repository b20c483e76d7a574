"""Test key bindings and the modes they are live in."""

import unittest
from unittest.mock import Mock

from mnemo.commands import (
    CommandRegistry, HelpCommand, NavigateCommand, QuitCommand,
)
from mnemo.constants import AppMode
from mnemo.keyboard import KeyEvent, KeyType
from mnemo.navigation import NavCommand


def key(ch):
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


class TestCommandRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = CommandRegistry()
        self.app = Mock()
        self.app.mode = AppMode.NAVIGATING

    def test_navigation_keys(self):
        expected = {
            'z': NavCommand.FROM_BEGINNING,
            'x': NavCommand.PREV_LINE,
            'c': NavCommand.NEXT_LINE,
            'v': NavCommand.NEXT_WORD,
        }
        for ch, nav_command in expected.items():
            self.app.engine.apply.reset_mock()
            self.assertTrue(self.registry.execute(self.app, key(ch)))
            self.app.engine.apply.assert_called_once_with(nav_command)

    def test_navigation_keys_ignored_in_menu(self):
        self.app.mode = AppMode.MENU

        self.assertFalse(self.registry.execute(self.app, key('c')))
        self.app.engine.apply.assert_not_called()

    def test_menu_keys_ignored_while_navigating(self):
        self.assertFalse(self.registry.execute(self.app, key('h')))
        self.assertFalse(self.registry.execute(self.app, key('l')))
        self.assertFalse(self.registry.execute(self.app, key('e')))
        self.app.show_help.assert_not_called()

    def test_quit_in_both_modes(self):
        for mode in (AppMode.MENU, AppMode.NAVIGATING):
            self.app.mode = mode
            self.app.running = True
            self.assertTrue(self.registry.execute(self.app, key('q')))
            self.assertFalse(self.app.running)

    def test_main_menu_from_navigation(self):
        self.assertTrue(self.registry.execute(self.app, key('m')))
        self.app.show_main_menu.assert_called_once_with()

    def test_menu_commands(self):
        self.app.mode = AppMode.MENU

        self.registry.execute(self.app, key('h'))
        self.registry.execute(self.app, key('l'))
        self.registry.execute(self.app, key('e'))

        self.app.show_help.assert_called_once_with()
        self.app.show_text_list.assert_called_once_with()
        self.app.start_text_prompt.assert_called_once_with()

    def test_no_binding_is_live_while_entering_text(self):
        self.app.mode = AppMode.ENTERING_TEXT
        for ch in 'qhlemzxcv':
            self.assertIsNone(self.registry.get_command(AppMode.ENTERING_TEXT, KeyType.REGULAR, ch))

    def test_unbound_key(self):
        self.assertFalse(self.registry.execute(self.app, key('?')))

    def test_key_type_is_part_of_binding(self):
        ctrl_q = KeyEvent(key_type=KeyType.CTRL, value='q', raw='\x11', is_ctrl=True)

        self.assertFalse(self.registry.execute(self.app, ctrl_q))

    def test_register_overrides_binding(self):
        self.registry.register((KeyType.REGULAR, 'n'), NavigateCommand(NavCommand.NEXT_LINE))

        self.assertTrue(self.registry.execute(self.app, key('n')))
        self.app.engine.apply.assert_called_once_with(NavCommand.NEXT_LINE)

    def test_get_command_types(self):
        self.assertIsInstance(
            self.registry.get_command(AppMode.MENU, KeyType.REGULAR, 'q'), QuitCommand)
        self.assertIsInstance(
            self.registry.get_command(AppMode.MENU, KeyType.REGULAR, 'h'), HelpCommand)


if __name__ == '__main__':
    unittest.main()

"""Turn curtsies key tokens into key events the app can dispatch on."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyType(Enum):
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """One key press.

    ``value`` is a single character for regular keys, the letter for Ctrl
    combinations, and a lowercase name ('enter', 'escape', ...) otherwise.
    """
    key_type: KeyType
    value: str
    raw: str
    is_ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        return self.key_type == KeyType.REGULAR and len(self.value) == 1 and self.value >= ' '


# curtsies names that mean something other than their lowercased self
NAMED_KEYS = {
    'esc': 'escape',
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'bs': 'backspace',
}

SPACE_NAMES = ('space', 'spacebar', 'spc')

# Ctrl letters that terminals send for Enter
ENTER_CTRL_LETTERS = ('j', 'm')

BACKSPACE_CHARS = ('\x7f', '\x08')
ESCAPE_CHAR = '\x1b'


def _ctrl_event(letter: str, raw: str) -> KeyEvent:
    if letter in ENTER_CTRL_LETTERS:
        return KeyEvent(KeyType.SPECIAL, 'enter', raw)
    return KeyEvent(KeyType.CTRL, letter, raw, is_ctrl=True)


def _parse_token(key_str: str) -> KeyEvent:
    # '<Ctrl-x>', '<ESC>', '<UP>', '<SPACE>', ...
    *mods, name = key_str[1:-1].lower().replace('+', '-').split('-')
    if 'ctrl' in mods and len(name) == 1:
        return _ctrl_event(name, key_str)
    if name in SPACE_NAMES and not mods:
        return KeyEvent(KeyType.REGULAR, ' ', ' ')
    name = NAMED_KEYS.get(name, name)
    if name == 'escape':
        return KeyEvent(KeyType.SPECIAL, name, ESCAPE_CHAR)
    return KeyEvent(KeyType.SPECIAL, name, key_str)


def _parse_char(ch: str) -> KeyEvent:
    if ch in BACKSPACE_CHARS:
        return KeyEvent(KeyType.SPECIAL, 'backspace', ch)
    if ch == ESCAPE_CHAR:
        return KeyEvent(KeyType.SPECIAL, 'escape', ch)
    if 1 <= ord(ch) <= 26:
        return _ctrl_event(chr(ord('a') + ord(ch) - 1), ch)
    return KeyEvent(KeyType.REGULAR, ch, ch)


class KeyboardHandler:
    """Reads keys from the terminal and parses them into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get the next key event, or None if no key arrived."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        key_str = str(key)
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return _parse_token(key_str)
        if len(key_str) == 1:
            return _parse_char(key_str)
        return KeyEvent(KeyType.REGULAR, key_str, key_str)

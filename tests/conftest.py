"""Shared fixtures: a fake blessed terminal and a virtual screen decoder."""

import io
import re

import pytest

from mnemo.screen import ScreenCursor


class FakeTerm:
    """Stands in for blessed.Terminal, emitting readable tokens.

    Cursor moves render as ``[y,x]`` (0-indexed like blessed), styles as
    ``[N]`` (normal) and ``[HI]`` (the default highlight color).
    """

    home = '[HOME]'
    clear = '[CLEAR]'
    clear_eol = '[EOL]'
    normal = '[N]'
    bright_cyan = '[HI]'
    bold = '[B]'
    italic = '[I]'
    enter_fullscreen = '[FS]'
    exit_fullscreen = '[/FS]'
    hide_cursor = '[HIDE]'
    normal_cursor = '[SHOW]'
    height = 24
    width = 80

    def __init__(self):
        self.stream = io.StringIO()

    def move(self, y, x):
        return f'[{y},{x}]'

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        # Any other color name
        return f'[C:{name}]'

    @property
    def output(self) -> str:
        return self.stream.getvalue()

    def take_output(self) -> str:
        """Return everything written so far and start afresh."""
        data = self.stream.getvalue()
        self.stream.seek(0)
        self.stream.truncate()
        return data


TOKEN = re.compile(r"\[(HOME|CLEAR|EOL|N|HI|B|I|C:\w+|\d+,\d+)\]")


class VirtualScreen:
    """Replays FakeTerm output onto a grid of (char, style) cells."""

    def __init__(self, width=FakeTerm.width):
        self.width = width
        self.rows: dict[int, list[tuple[str, str]]] = {}
        self.y = 0
        self.x = 0
        self.style = 'N'

    def feed(self, data: str) -> "VirtualScreen":
        pos = 0
        for m in TOKEN.finditer(data):
            self._put(data[pos:m.start()])
            pos = m.end()
            tok = m.group(1)
            if tok == 'HOME':
                self.y = self.x = 0
            elif tok == 'CLEAR':
                self.rows.clear()
            elif tok == 'EOL':
                row = self.rows.get(self.y, [])
                self.rows[self.y] = row[:self.x]
            elif tok in ('N', 'B', 'I'):
                self.style = 'N'
            elif tok == 'HI' or tok.startswith('C:'):
                self.style = 'HI'
            else:
                y, x = tok.split(',')
                self.y, self.x = int(y), int(x)
        self._put(data[pos:])
        return self

    def _put(self, text: str) -> None:
        if not text:
            return
        for ch in text:
            if self.x >= self.width:
                # Autowrap, as a real terminal does
                self.y += 1
                self.x = 0
            row = self.rows.setdefault(self.y, [])
            while len(row) < self.x:
                row.append((' ', 'N'))
            if self.x < len(row):
                row[self.x] = (ch, self.style)
            else:
                row.append((ch, self.style))
            self.x += 1

    def text(self, row: int) -> str:
        """Text on a 1-indexed row."""
        return ''.join(ch for ch, _ in self.rows.get(row - 1, []))

    def highlighted(self, row: int) -> str:
        return ''.join(ch for ch, style in self.rows.get(row - 1, []) if style == 'HI')


@pytest.fixture
def term():
    return FakeTerm()


@pytest.fixture
def screen(term):
    return ScreenCursor(term)


@pytest.fixture
def virtual_screen():
    return VirtualScreen()


@pytest.fixture
def term_factory():
    return FakeTerm


@pytest.fixture
def virtual_screen_factory():
    return VirtualScreen

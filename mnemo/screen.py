"""Physical terminal cursor and row-level redraw primitives."""

from enum import Enum
from typing import Optional, TextIO

from .config import is_known_color


class Style(Enum):
    NEUTRAL = "neutral"
    HIGHLIGHTED = "highlighted"


class ScreenCursor:
    """Tracks the physical cursor and redraws whole rows.

    Rows and columns are 1-indexed; blessed's ``move`` is 0-indexed, so the
    conversion happens only in :meth:`_goto`. Each row's last written
    content is cached and an identical rewrite is skipped. Rows are clipped
    to the terminal width so a long line never spills onto the next row.
    """

    def __init__(self, term, stream: Optional[TextIO] = None,
                 highlight_color: str = "bright_cyan", footer: str = ""):
        self.term = term
        self.stream = stream if stream is not None else term.stream
        if not is_known_color(highlight_color):
            raise ValueError(f"Unknown highlight color: {highlight_color!r}")
        self.highlight_color = highlight_color
        # Status text kept on the bottom terminal row across resets
        self.footer = footer
        self.row = 1
        self.col = 1
        self._rows: dict[int, str] = {}

    def _write(self, s: str) -> None:
        self.stream.write(s)

    def _goto(self, row: int, col: int = 1) -> str:
        return self.term.move(row - 1, col - 1)

    def _style(self, style: Style) -> str:
        if style is Style.HIGHLIGHTED:
            return str(getattr(self.term, self.highlight_color))
        return str(self.term.normal)

    def _compose(self, *parts: tuple[str, Style]) -> str:
        out = []
        for text, style in parts:
            out.append(self._style(style))
            out.append(text)
        out.append(str(self.term.normal))
        return "".join(out)

    def _clip(self, *parts: tuple[str, Style]) -> list[tuple[str, Style]]:
        # Rows never wrap: text past the last column is dropped
        room = self.term.width
        clipped = []
        for text, style in parts:
            clipped.append((text[:max(room, 0)], style))
            room -= len(text)
        return clipped

    def _put_row(self, parts: list[tuple[str, Style]]) -> None:
        composed = self._compose(*parts)
        width = sum(len(text) for text, _ in parts)
        if self._rows.get(self.row) == composed:
            # Same content already on screen; only reposition
            self._write(self._goto(self.row, width + 1))
        else:
            self._write(self._goto(self.row) + self.term.clear_eol + composed)
            self._rows[self.row] = composed
        self.col = width + 1

    def reset(self) -> None:
        """Clear the whole screen and home the cursor."""
        out = self.term.home + self.term.clear
        if self.footer:
            out += self.term.move(self.term.height - 1, 0) + self.footer + self._goto(1)
        self._write(out)
        self.row = 1
        self.col = 1
        self._rows.clear()

    def advance_row(self) -> None:
        self.row += 1
        self.col = 1
        self._write(self._goto(self.row))

    def retreat_row(self) -> None:
        if self.row <= 1:
            raise ValueError("Cannot move above the first terminal row")
        self.row -= 1
        self.col = 1
        self._write(self._goto(self.row))

    def rewrite_row(self, content: str, style: Style = Style.NEUTRAL) -> None:
        """Clear the current row and write content from column 1."""
        self._put_row(self._clip((content, style)))

    def rewrite_row_partial(self, prefix: str, segment: str,
                            prefix_style: Style = Style.NEUTRAL,
                            segment_style: Style = Style.HIGHLIGHTED) -> None:
        """Clear the current row, write prefix then segment after it.

        The segment starts at column ``len(prefix) + 1``.
        """
        self._put_row(self._clip((prefix, prefix_style), (segment, segment_style)))

    def clear_row(self) -> None:
        if self._rows.get(self.row) == "":
            self._write(self._goto(self.row))
        else:
            self._write(self._goto(self.row) + self.term.clear_eol)
            self._rows[self.row] = ""
        self.col = 1

    def flush(self) -> None:
        self.stream.flush()

"""Immutable text model: a loaded text as lines of words."""

from dataclasses import dataclass
from typing import Optional

LINE_SEPARATOR = "\n"
WORD_SEPARATOR = " "


@dataclass(frozen=True)
class Line:
    """A single line of a text, split into words.

    Words are the raw tokens between single spaces, so runs of spaces
    produce empty words. They are kept as-is.
    """
    words: tuple[str, ...]

    @property
    def word_count(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return WORD_SEPARATOR.join(self.words)


@dataclass(frozen=True)
class Text:
    lines: tuple[Line, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "Text":
        """Parse raw file content into a Text.

        Splits on newlines, then each line on single spaces. Nothing is
        trimmed or collapsed: an empty file is one line holding one empty
        word, and a trailing newline yields a trailing empty line.
        """
        return cls(tuple(
            Line(tuple(segment.split(WORD_SEPARATOR)))
            for segment in raw.split(LINE_SEPARATOR)
        ))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def line_string(self, index: int) -> Optional[str]:
        """Return the full line joined by single spaces."""
        line = self.line_at(index)
        return None if line is None else str(line)

    def partial_line(self, index: int, up_to_word: int) -> Optional[str]:
        """Return the first `up_to_word` words of a line joined by spaces."""
        line = self.line_at(index)
        if line is None or not 0 <= up_to_word <= line.word_count:
            return None
        return WORD_SEPARATOR.join(line.words[:up_to_word])

    def word_at(self, index: int, word_index: int) -> Optional[str]:
        line = self.line_at(index)
        if line is None or not 0 <= word_index < line.word_count:
            return None
        return line.words[word_index]

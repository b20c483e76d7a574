"""Exceptions raised by mnemo."""


class MnemoError(Exception):
    """Base class for mnemo errors."""


class TextNotFoundError(MnemoError):
    """A requested text could not be read from the texts directory."""

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f"No text found at path: {path}")

"""Constants and user-facing messages for mnemo."""

from enum import Enum


class AppMode(Enum):
    """What the key loop is currently doing."""
    MENU = "menu"
    ENTERING_TEXT = "entering_text"
    NAVIGATING = "navigating"


class AppConstants:
    """Central configuration constants for the app."""

    # Menu keys
    KEY_QUIT = 'q'
    KEY_HELP = 'h'
    KEY_LIST_TEXTS = 'l'
    KEY_ENTER_TEXT = 'e'
    KEY_MAIN_MENU = 'm'

    # Navigation keys
    KEY_FROM_BEGINNING = 'z'
    KEY_PREV_LINE = 'x'
    KEY_NEXT_LINE = 'c'
    KEY_NEXT_WORD = 'v'

    # Row (0-indexed) where the typed text name is echoed
    PROMPT_INPUT_ROW = 1

    # Messages
    TITLE = "Mnemo!"
    MENU_LINES = (
        "q to exit.",
        "h for help.",
        "l to list texts.",
        "e to enter a text.",
    )
    HELP_LINES = (
        "Mnemo is a tiny app to help you memorise short texts like poems, book openings, or quotes.",
        "",
        "Save the text as a .txt file into '{texts_dir}' and then run Mnemo.",
        "",
        "z  start from the beginning    x  previous line",
        "c  next line                   v  next word",
        "m  main menu                   q  quit",
    )
    ENTERING_TEXT_MESSAGE = "Entering text:"
    AVAILABLE_TEXTS_MESSAGE = "Available texts: {}"
    NO_TEXTS_MESSAGE = "No texts found in '{}'"
    UNHANDLED_KEY_MESSAGE = "Unhandled character"
    NAVIGATION_STATUS = "{name}  z restart  x previous line  c next line  v next word  m menu  q quit"

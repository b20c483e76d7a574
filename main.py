#!/usr/bin/env python3
"""Mnemo - memorise short texts.

Usage:
    python main.py [text-name]

Controls:
    q: Quit            h: Help             l: List texts
    e: Enter a text    m: Main menu
    z: From beginning  x: Previous line
    c: Next line       v: Next word
"""

import sys
from mnemo.__main__ import main


if __name__ == "__main__":
    sys.exit(main())

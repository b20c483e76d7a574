"""Mnemo - progressively reveal short texts to practise recall."""

import logging

from .model import Line, Text
from .navigation import NavCommand, NavigationCursor, Transition, TransitionKind, step
from .screen import ScreenCursor, Style
from .engine import RenderEngine

# Applications configure handlers; stay silent by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Line',
    'Text',
    'NavCommand',
    'NavigationCursor',
    'Transition',
    'TransitionKind',
    'step',
    'ScreenCursor',
    'Style',
    'RenderEngine',
]

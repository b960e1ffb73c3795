# src/termsnake/terminal.py
from __future__ import annotations
import curses
import logging
from typing import List, Optional

from .config import BORDER_COLS, FOOTER_ROWS, HEADER_ROWS
from .controls import Key
from .errors import ConfigurationError
from .geometry import Board

logger = logging.getLogger(__name__)

CURSES_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_ENTER: Key.CONFIRM,
    ord("\n"): Key.CONFIRM,
    ord("\r"): Key.CONFIRM,
    ord(" "): Key.CONFIRM,
    27: Key.QUIT,       # Esc
}

CHAR_KEYS = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "p": Key.PAUSE,
    "q": Key.QUIT,
}


def to_key(code: int) -> Key:
    """Translate a curses key code to a game Key."""
    if code in CURSES_KEYS:
        return CURSES_KEYS[code]
    if 0 <= code < 256:
        return CHAR_KEYS.get(chr(code).lower(), Key.OTHER)
    return Key.OTHER


class CursesKeySource:
    """Non-blocking key poll over a curses window."""

    def __init__(self, window):
        self.window = window

    def poll(self) -> List[Key]:
        """Drain every key already queued; never waits."""
        keys: List[Key] = []
        while True:
            code = self.window.getch()
            if code == -1:
                return keys
            keys.append(to_key(code))


def setup_terminal(window) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        # some terminals cannot hide the cursor
        logger.debug("cursor visibility not supported")
    window.nodelay(True)
    window.keypad(True)


def board_for_screen(rows: int, cols: int,
                     width: Optional[int] = None,
                     height: Optional[int] = None) -> Board:
    """
    Playable grid for a screen of rows x cols, leaving room for the title,
    border and status lines. Explicit width/height are clamped to fit.
    """
    max_w = cols - BORDER_COLS
    max_h = rows - HEADER_ROWS - FOOTER_ROWS
    if max_w < 1 or max_h < 1:
        raise ConfigurationError(f"terminal too small ({cols}x{rows})")
    w = max_w if width is None else min(width, max_w)
    h = max_h if height is None else min(height, max_h)
    return Board(w, h)

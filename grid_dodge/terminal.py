"""Curses terminal backend.

Thin adapters between a curses window and the game: a blocking key reader
that satisfies :class:`grid_dodge.input.InputProvider` and a display that
replaces the whole screen with each frame.
"""

import curses
import logging
from typing import Dict

from grid_dodge.actions import GameInput, Key
from grid_dodge.input import poll_until_bound

logger = logging.getLogger(__name__)

ESCAPE = 27

CURSES_KEYS: Dict[int, Key] = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    ESCAPE: Key.ESCAPE,
}


class CursesInputProvider:
    def __init__(self, window: "curses.window"):
        self.window = window
        self.window.keypad(True)

    def poll_input(self) -> GameInput:
        return poll_until_bound(self.window.getch, CURSES_KEYS)


class CursesDisplay:
    def __init__(self, window: "curses.window"):
        self.window = window

    def show(self, frame: str) -> None:
        """Replace the screen with ``frame``, clipped to the window size."""
        self.window.clear()
        height, width = self.window.getmaxyx()
        lines = frame.splitlines()
        if len(lines) > height or any(len(line) > width for line in lines):
            logger.debug("Frame clipped to %dx%d window", width, height)
        for y, line in enumerate(lines[:height]):
            try:
                self.window.addstr(y, 0, line[:width])
            except curses.error:
                pass  # writing the bottom-right cell moves the cursor off-screen
        self.window.refresh()

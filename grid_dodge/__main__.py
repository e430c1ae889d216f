"""Terminal entry point: ``python -m grid_dodge``."""

import curses

from grid_dodge.config import DEFAULT_CONFIG
from grid_dodge.loop import run
from grid_dodge.terminal import CursesDisplay, CursesInputProvider
from grid_dodge.world import World


def play(window: "curses.window") -> None:
    curses.set_escdelay(25)
    curses.curs_set(0)
    world = World.from_config(DEFAULT_CONFIG)
    run(world, CursesInputProvider(window), CursesDisplay(window))


def main() -> None:
    try:
        curses.wrapper(play)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

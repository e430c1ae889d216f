"""Character-grid renderer.

Produces a full frame as one string: ``height`` rows of ``width`` glyphs, each
row followed by the line separator, plus a two-line trailer while the game is
over. Displays overwrite the previous frame with it wholesale.
"""

from typing import List

from grid_dodge.components import EMPTY_GLYPH, GLYPHS, Position
from grid_dodge.renderer import build_scene_index
from grid_dodge.state import State

GAME_OVER_MESSAGE = "Game over!"
RESTART_HINT = "Press ESC to restart"


class TextRenderer:
    """Rasterize a ``State`` into a character frame.

    Args:
        line_separator: Appended after every row and trailer line. Raw curses
            windows usually want ``"\\r\\n"``.
    """

    def __init__(self, line_separator: str = "\n"):
        self.line_separator = line_separator

    def rows(self, state: State) -> List[str]:
        scene_index = build_scene_index(state)
        rows: List[str] = []
        for y in range(state.height):
            row = ""
            for x in range(state.width):
                occupant = scene_index.get(Position(x, y))
                row += EMPTY_GLYPH if occupant is None else GLYPHS[occupant]
            rows.append(row)
        if state.game_over:
            rows.append(GAME_OVER_MESSAGE)
            rows.append(RESTART_HINT)
        return rows

    def draw(self, state: State) -> str:
        """Return the frame for ``state``; the state is not modified."""
        return "".join(row + self.line_separator for row in self.rows(state))

"""Grid math helpers.

Pure predicates used by the movement and pruning systems.
"""

from grid_dodge.components import Position
from grid_dodge.state import State


def translate(pos: Position, delta: Position) -> Position:
    """Return ``pos`` shifted by the direction vector ``delta``."""
    return Position(pos.x + delta.x, pos.y + delta.y)


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is a visible cell of the board."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def is_column_in_bounds(state: State, pos: Position) -> bool:
    """Return True if the column of ``pos`` exists; the row is not checked."""
    return 0 <= pos.x < state.width

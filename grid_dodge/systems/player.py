"""Player input system.

Applies a ``Move`` or ``Wait`` command to the player. Moves are horizontal by
construction of the bound directions, so only the column of the candidate
cell is bounds checked; a move that would leave the grid is dropped.
"""

from dataclasses import replace

from grid_dodge.actions import GameInput, Move, Wait
from grid_dodge.state import State
from grid_dodge.utils.grid import is_column_in_bounds, translate


def player_input_system(state: State, game_input: GameInput) -> State:
    """Apply ``game_input`` to the player if it is alive.

    Args:
        state (State): Current state.
        game_input (GameInput): ``Move`` or ``Wait``; other commands are
            handled by the reducer.

    Returns:
        State: State with the player moved, or the same object if nothing changed.
    """
    if state.player is None or isinstance(game_input, Wait):
        return state
    if not isinstance(game_input, Move):
        return state
    candidate = translate(state.player, game_input.direction)
    if not is_column_in_bounds(state, candidate):
        return state
    return replace(state, player=candidate)

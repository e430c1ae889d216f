"""Garbage collection utilities.

Enemies keep falling after they leave the grid. Nothing can collide with them
there (the player never leaves the bottom row), so once an enemy's row is
``>= height`` it is dead weight. Pruning keeps the enemy vector bounded over
long sessions.
"""

from dataclasses import replace

from pyrsistent import pvector

from grid_dodge.state import State


def prune_offgrid_enemies(state: State) -> State:
    """Drop enemies that have fallen below the last row."""
    kept = [enemy for enemy in state.enemies if enemy.y < state.height]
    if len(kept) == len(state.enemies):
        return state
    return replace(state, enemies=pvector(kept))

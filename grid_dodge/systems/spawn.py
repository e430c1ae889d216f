"""Enemy spawn system.

Each column runs its own Bernoulli trial per tick, so the expected number of
new enemies is ``width * spawn_chance``.
"""

import random
from dataclasses import replace

from grid_dodge.components import Position
from grid_dodge.state import State


def spawn_system(state: State, rng: random.Random) -> State:
    """Append a new enemy on the top row for every column whose roll succeeds."""
    enemies = state.enemies
    for x in range(state.width):
        if rng.random() < state.spawn_chance:
            enemies = enemies.append(Position(x, 0))
    return replace(state, enemies=enemies)

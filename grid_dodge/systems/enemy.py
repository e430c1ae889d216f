"""Enemy fall system.

Every enemy drops one row per tick. Collision is checked right after each
enemy moves against the *current* player value, so several enemies landing on
the player in the same tick simply clear it once.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from pyrsistent import pvector

from grid_dodge.components import Position
from grid_dodge.state import State
from grid_dodge.utils.grid import translate

logger = logging.getLogger(__name__)

FALL = Position(0, 1)


def enemy_fall_system(state: State) -> State:
    """Advance all enemies one row and resolve collisions with the player."""
    player: Optional[Position] = state.player
    moved: List[Position] = []
    for enemy in state.enemies:
        enemy = translate(enemy, FALL)
        moved.append(enemy)
        if player is not None and enemy == player:
            logger.info("Enemy hit player at (%d, %d)", enemy.x, enemy.y)
            player = None
    return replace(state, player=player, enemies=pvector(moved))

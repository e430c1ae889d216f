"""State reducer and step orchestration.

This module wires the systems together in the order that defines one *tick*.
:func:`step` is the only public transition for gameplay progression and is
pure: it returns a new :class:`grid_dodge.state.State`.

Ordering:

1. Player input. ``Restart`` during game over resets the world and ends the
   tick right there; ``Restart`` while alive is dropped.
2. ``enemy_fall_system`` moves every enemy down and resolves collisions.
3. ``prune_offgrid_enemies`` (optional) drops enemies below the grid.
4. ``spawn_system`` rolls one spawn per column on the top row.
5. The turn counter is bumped.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from pyrsistent import pvector

from grid_dodge.actions import GameInput, Move, Restart, Wait
from grid_dodge.components import Position
from grid_dodge.state import State
from grid_dodge.systems.enemy import enemy_fall_system
from grid_dodge.systems.player import player_input_system
from grid_dodge.systems.spawn import spawn_system
from grid_dodge.utils.gc import prune_offgrid_enemies

logger = logging.getLogger(__name__)


def restart(state: State) -> State:
    """Reset the world: player centered on the bottom row, no enemies.

    Dimensions, spawn settings and seed are kept; ``turn`` goes back to zero
    and ``episode`` is incremented. Always succeeds regardless of phase.
    """
    player = Position(state.width // 2, state.height - 1)
    return replace(
        state,
        player=player,
        enemies=pvector(),
        turn=0,
        episode=state.episode + 1,
    )


def spawn_rng(state: State) -> random.Random:
    """Return the RNG for this tick's spawn rolls.

    Deterministic per ``(seed, episode, turn)`` when the state is seeded,
    otherwise a freshly seeded generator.
    """
    if state.seed is None:
        return random.Random()
    return random.Random(hash((state.seed, state.episode, state.turn)))


def step(
    state: State, game_input: GameInput, rng: Optional[random.Random] = None
) -> State:
    """Advance the game by one tick.

    Args:
        state (State): Previous immutable state.
        game_input (GameInput): Command polled for this tick.
        rng (random.Random | None): Spawn generator override. Defaults to
            :func:`spawn_rng`.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If ``game_input`` is not a recognized command.
    """
    if isinstance(game_input, Restart):
        if state.game_over:
            logger.info("Restarting after game over")
            return restart(state)
    elif isinstance(game_input, (Move, Wait)):
        state = player_input_system(state, game_input)
    else:
        raise ValueError(f"Input is not valid: {game_input!r}")

    was_alive = state.alive
    state = enemy_fall_system(state)
    if was_alive and state.game_over:
        logger.info("Game over on turn %d", state.turn)

    if state.prune_offgrid:
        state = prune_offgrid_enemies(state)
    state = spawn_system(state, rng if rng is not None else spawn_rng(state))
    return replace(state, turn=state.turn + 1)

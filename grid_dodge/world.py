"""Mutable world façade over the pure reducer.

Interactive loops want an object they can poke once per tick; :class:`World`
holds the current :class:`grid_dodge.state.State` and swaps it for the result
of :func:`grid_dodge.step.step` on every ``update``. The world is created once
and reset in place; it is never rebuilt.
"""

import random
from typing import Optional

from pyrsistent.typing import PVector

from grid_dodge.actions import GameInput
from grid_dodge.components import Position
from grid_dodge.config import GameConfig
from grid_dodge.state import DEFAULT_SPAWN_CHANCE, State
from grid_dodge.step import restart, step


class World:
    """Game world with in-place ``restart`` and ``update``.

    Args:
        width: Grid width in cells (positive).
        height: Grid height in cells (positive).
        spawn_chance: Per-column enemy spawn probability per tick.
        seed: Base seed for deterministic spawning.
        prune_offgrid: Drop enemies once they leave the grid.
        rng: Explicit spawn generator; overrides ``seed`` derived generators.

    Raises:
        ValueError: If the dimensions or spawn chance are invalid.
    """

    def __init__(
        self,
        width: int = 8,
        height: int = 8,
        *,
        spawn_chance: float = DEFAULT_SPAWN_CHANCE,
        seed: Optional[int] = None,
        prune_offgrid: bool = True,
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng
        self._state = State(
            width=width,
            height=height,
            spawn_chance=spawn_chance,
            seed=seed,
            prune_offgrid=prune_offgrid,
        )
        self.restart()

    @classmethod
    def from_config(
        cls, config: GameConfig, rng: Optional[random.Random] = None
    ) -> "World":
        return cls(
            config.width,
            config.height,
            spawn_chance=config.spawn_chance,
            seed=config.seed,
            prune_offgrid=config.prune_offgrid,
            rng=rng,
        )

    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, state: State) -> None:
        if (state.width, state.height) != (self.width, self.height):
            raise ValueError("World dimensions are fixed after construction")
        self._state = state

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    @property
    def player(self) -> Optional[Position]:
        return self._state.player

    @property
    def enemies(self) -> PVector[Position]:
        return self._state.enemies

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    def restart(self) -> None:
        """Put the player back at the bottom center and clear all enemies."""
        self._state = restart(self._state)

    def update(self, game_input: GameInput) -> None:
        """Consume one input and advance the simulation by a tick."""
        self._state = step(self._state, game_input, self._rng)

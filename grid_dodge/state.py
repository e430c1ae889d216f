"""Core immutable game `State` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game at a single tick. Systems are pure functions that take a previous
``State`` (plus an input or a random generator) and return a *new* ``State``;
nothing is mutated in place.

Design notes:

* ``player`` is ``None`` once an enemy lands on it. Presence / absence of the
    player is the only distinction between the *alive* and *game over* phases.
* ``enemies`` is a persistent vector (``pyrsistent.PVector``) in spawn order.
    Order carries no gameplay meaning but it does decide which glyph wins when
    two objects share a cell at draw time.
* ``turn`` counts ticks since the last restart and ``episode`` counts
    restarts; together with ``seed`` they derive the per-tick spawn RNG.

See :mod:`grid_dodge.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from grid_dodge.components import Position

DEFAULT_SPAWN_CHANCE = 0.25


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        width (int): Grid width in cells. Must be positive.
        height (int): Grid height in cells. Must be positive.
        player (Position | None): Player cell while alive, ``None`` after a collision.
        enemies (PVector[Position]): Falling enemies in spawn order.
        spawn_chance (float): Per-column probability of spawning an enemy each tick.
        prune_offgrid (bool): Drop enemies once they fall below the last row.
        seed (int | None): Base RNG seed for deterministic spawning.
        turn (int): Ticks since the last restart.
        episode (int): Number of restarts performed.
    """

    width: int
    height: int
    player: Optional[Position] = None
    enemies: PVector[Position] = pvector()
    spawn_chance: float = DEFAULT_SPAWN_CHANCE
    prune_offgrid: bool = True
    seed: Optional[int] = None
    turn: int = 0
    episode: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.spawn_chance <= 1.0:
            raise ValueError(
                f"spawn_chance must lie in [0, 1], got {self.spawn_chance}"
            )

    @property
    def alive(self) -> bool:
        return self.player is not None

    @property
    def game_over(self) -> bool:
        return self.player is None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None`` and not an empty collection.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description

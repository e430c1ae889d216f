"""Game configuration.

All knobs live in a frozen dataclass; the game takes no command-line flags or
environment variables, so changing a setting means constructing a different
``GameConfig``.
"""

from dataclasses import dataclass
from typing import Optional

from grid_dodge.state import DEFAULT_SPAWN_CHANCE


@dataclass(frozen=True)
class GameConfig:
    width: int = 8
    height: int = 8
    spawn_chance: float = DEFAULT_SPAWN_CHANCE
    prune_offgrid: bool = True
    seed: Optional[int] = None


DEFAULT_CONFIG = GameConfig()

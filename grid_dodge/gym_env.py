"""Gymnasium environment wrapper for grid_dodge.

Exposes the game to agents as a ``gym.Env``. The observation is the board as
a ``(height, width)`` ``uint8`` array (see :data:`CELL_CODES`); the action
space is ``Discrete(len(GymAction))``. Reward is ``-1.0`` on the tick the
player is hit and ``0.0`` otherwise; ``terminated`` is ``True`` once the game
is over. ``truncated`` is always ``False``; wrap with ``TimeLimit`` to cap
episode length.

Usage:

``env = GridDodgeEnv(width=8, height=8, seed=0)``
"""

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from grid_dodge.actions import GYM_ACTION_INPUTS, GymAction
from grid_dodge.components import ObjectType
from grid_dodge.renderer import build_scene_index
from grid_dodge.renderer.text import TextRenderer
from grid_dodge.renderer.texture import DEFAULT_RESOLUTION, TextureRenderer
from grid_dodge.state import DEFAULT_SPAWN_CHANCE, State
from grid_dodge.step import restart, step
from grid_dodge.utils.grid import is_in_bounds

ObsType = np.ndarray

EMPTY_CODE = 0
CELL_CODES: Dict[ObjectType, int] = {
    ObjectType.PLAYER: 1,
    ObjectType.ENEMY: 2,
}


def grid_observation(state: State) -> ObsType:
    """Encode the visible board as a ``uint8`` array indexed ``[y, x]``."""
    grid = np.full((state.height, state.width), EMPTY_CODE, dtype=np.uint8)
    for pos, object_type in build_scene_index(state).items():
        if is_in_bounds(state, pos):
            grid[pos.y, pos.x] = CELL_CODES[object_type]
    return grid


def state_info(state: State) -> Dict[str, Any]:
    """Status dictionary returned alongside observations."""
    return {
        "phase": "game_over" if state.game_over else "alive",
        "turn": int(state.turn),
        "episode": int(state.episode),
        "enemies": len(state.enemies),
        "seed": state.seed,
    }


class GridDodgeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for grid_dodge."""

    metadata = {"render_modes": ["ansi", "rgb_array", "human"]}

    def __init__(
        self,
        width: int = 8,
        height: int = 8,
        spawn_chance: float = DEFAULT_SPAWN_CHANCE,
        seed: Optional[int] = None,
        render_mode: str = "ansi",
        render_resolution: int = DEFAULT_RESOLUTION,
    ):
        """Create a new environment instance.

        Arguments:
            width: Grid width in cells.
            height: Grid height in cells.
            spawn_chance: Per-column spawn probability per tick.
            seed: Base seed for spawning; ``reset(seed=...)`` overrides it.
            render_mode: "ansi" for text frames, "rgb_array" for numpy
                images, "human" to open an image viewer.
            render_resolution: Width in pixels for image rendering.
        """
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")
        self.render_mode = render_mode
        self._base_state = State(
            width=width, height=height, spawn_chance=spawn_chance, seed=seed
        )
        self.state: Optional[State] = None
        self._text_renderer = TextRenderer()
        self._texture_renderer = TextureRenderer(resolution=render_resolution)

        self.observation_space = spaces.Box(
            low=0,
            high=max(CELL_CODES.values()),
            shape=(height, width),
            dtype=np.uint8,
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Replaces the spawn seed for this and later episodes.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._base_state = replace(self._base_state, seed=seed)
        episode = self.state.episode if self.state is not None else 0
        self.state = restart(replace(self._base_state, episode=episode))
        return grid_observation(self.state), state_info(self.state)

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one tick.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None, "Call reset() before step()"
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")

        was_alive = self.state.alive
        self.state = step(self.state, GYM_ACTION_INPUTS[GymAction(int(action))])
        reward = -1.0 if was_alive and self.state.game_over else 0.0
        terminated = self.state.game_over
        return grid_observation(self.state), reward, terminated, False, state_info(
            self.state
        )

    def render(self) -> Optional[str | np.ndarray]:  # type: ignore[override]
        """Render the current state in the configured ``render_mode``."""
        assert self.state is not None, "Call reset() before render()"
        if self.render_mode == "ansi":
            return self._text_renderer.draw(self.state)
        img: PILImage = self._texture_renderer.render(self.state)
        if self.render_mode == "human":
            img.show()
            return None
        return np.asarray(img.convert("RGB"))

import random

import pytest

from grid_dodge.actions import MOVE_LEFT, RESTART, WAIT
from grid_dodge.components import Position
from grid_dodge.config import GameConfig
from grid_dodge.world import World
from tests.test_utils import make_state


def test_new_world_starts_alive_at_bottom_center() -> None:
    world = World(8, 8)
    assert world.player == Position(4, 7)
    assert len(world.enemies) == 0
    assert not world.game_over


def test_world_rejects_invalid_dimensions() -> None:
    with pytest.raises(ValueError):
        World(0, 8)


def test_update_mutates_in_place() -> None:
    world = World(8, 8, spawn_chance=0.0)
    world.update(MOVE_LEFT)
    assert world.player == Position(3, 7)


def test_collision_then_restart_cycle() -> None:
    world = World(8, 8, spawn_chance=0.0)
    world.state = make_state(player=(4, 7), enemies=[(4, 6)])
    world.update(WAIT)
    assert world.game_over
    world.update(WAIT)
    assert world.game_over
    world.update(RESTART)
    assert world.player == Position(4, 7)
    assert len(world.enemies) == 0


def test_restart_resets_in_place() -> None:
    world = World(6, 4, spawn_chance=1.0, rng=random.Random(0))
    world.update(WAIT)
    assert len(world.enemies) == 6
    world.restart()
    assert world.player == Position(3, 3)
    assert len(world.enemies) == 0


def test_dimensions_cannot_change() -> None:
    world = World(8, 8)
    with pytest.raises(ValueError):
        world.state = make_state(player=(0, 0), width=4, height=4)


def test_from_config() -> None:
    world = World.from_config(GameConfig(width=5, height=9, spawn_chance=0.0, seed=3))
    assert (world.width, world.height) == (5, 9)
    assert world.player == Position(2, 8)
    assert world.state.seed == 3

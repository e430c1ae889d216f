import logging
from typing import List

import pytest

from grid_dodge.actions import MOVE_LEFT, RESTART, WAIT
from grid_dodge.components import Position
from grid_dodge.input import ScriptedInputProvider, ScriptExhausted
from grid_dodge.loop import run
from grid_dodge.renderer.text import GAME_OVER_MESSAGE, TextRenderer
from grid_dodge.world import World
from tests.test_utils import make_state


class RecordingDisplay:
    def __init__(self) -> None:
        self.frames: List[str] = []

    def show(self, frame: str) -> None:
        self.frames.append(frame)


def test_runs_requested_number_of_ticks() -> None:
    world = World(8, 8, spawn_chance=0.0)
    display = RecordingDisplay()
    ticks = run(
        world, ScriptedInputProvider([MOVE_LEFT, MOVE_LEFT]), display, max_ticks=2
    )
    assert ticks == 2
    assert world.player == Position(2, 7)
    assert display.frames[0].splitlines()[-1] == "    ^   "
    assert display.frames[1].splitlines()[-1] == "   ^    "


def test_loop_runs_until_input_source_fails() -> None:
    world = World(8, 8, spawn_chance=0.0)
    display = RecordingDisplay()
    with pytest.raises(ScriptExhausted):
        run(world, ScriptedInputProvider([WAIT, WAIT]), display)
    assert len(display.frames) == 3
    assert world.state.turn == 2


def test_game_over_frame_then_restart() -> None:
    world = World(8, 8, spawn_chance=0.0)
    world.state = make_state(player=(4, 7), enemies=[(4, 6)])
    display = RecordingDisplay()
    run(world, ScriptedInputProvider([WAIT, RESTART]), display, max_ticks=2)
    assert GAME_OVER_MESSAGE not in display.frames[0]
    assert GAME_OVER_MESSAGE in display.frames[1]
    assert world.player == Position(4, 7)


def test_custom_renderer_is_used() -> None:
    world = World(1, 1, spawn_chance=0.0)
    display = RecordingDisplay()
    renderer = TextRenderer(line_separator="|")
    run(world, ScriptedInputProvider([WAIT]), display, renderer, max_ticks=1)
    assert display.frames == ["^|"]


def test_ticks_are_logged_with_state_description(
    caplog: pytest.LogCaptureFixture,
) -> None:
    world = World(8, 8, spawn_chance=0.0)
    with caplog.at_level(logging.DEBUG, logger="grid_dodge.loop"):
        run(
            world, ScriptedInputProvider([MOVE_LEFT]), RecordingDisplay(), max_ticks=1
        )
    messages = [
        r.getMessage() for r in caplog.records if r.name == "grid_dodge.loop"
    ]
    assert len(messages) == 1
    assert "Tick 1" in messages[0]
    assert "Position(x=3, y=7)" in messages[0]

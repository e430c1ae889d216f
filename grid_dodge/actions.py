"""Game input commands and key bindings.

A :data:`GameInput` is a small tagged value produced fresh every tick by an
input provider and consumed by :func:`grid_dodge.step.step`:

* :class:`Wait`: no motion ("soft tick"); enemies still fall.
* :class:`Move`: a horizontal step by ``direction``.
* :class:`Restart`: reset the world, honoured only after game over.

``KEY_BINDINGS`` maps logical :class:`Key` values to commands; backends
translate their raw key codes to :class:`Key` first. ``GymAction`` is the
stable integer mapping used by the Gymnasium environment.
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Dict, Union

from grid_dodge.components import Position


@dataclass(frozen=True)
class Wait:
    """Advance one tick without moving."""


@dataclass(frozen=True)
class Move:
    """Move the player by ``direction`` (horizontal deltas only are bound)."""

    direction: Position


@dataclass(frozen=True)
class Restart:
    """Reset the world if the game is over; dropped while alive."""


GameInput = Union[Wait, Move, Restart]

WAIT = Wait()
MOVE_LEFT = Move(Position(-1, 0))
MOVE_RIGHT = Move(Position(1, 0))
RESTART = Restart()


class Key(StrEnum):
    """Logical keys recognized by the game."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    ESCAPE = auto()


KEY_BINDINGS: Dict[Key, GameInput] = {
    Key.LEFT: MOVE_LEFT,
    Key.RIGHT: MOVE_RIGHT,
    Key.UP: WAIT,
    Key.ESCAPE: RESTART,
}


class GymAction(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    LEFT = 0
    RIGHT = auto()
    WAIT = auto()
    RESTART = auto()


GYM_ACTION_INPUTS: Dict[GymAction, GameInput] = {
    GymAction.LEFT: MOVE_LEFT,
    GymAction.RIGHT: MOVE_RIGHT,
    GymAction.WAIT: WAIT,
    GymAction.RESTART: RESTART,
}

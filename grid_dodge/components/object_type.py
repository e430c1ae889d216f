"""Occupant kinds and their glyphs."""

from enum import StrEnum, auto
from typing import Dict


class ObjectType(StrEnum):
    """Kind of object occupying a cell."""

    PLAYER = auto()
    ENEMY = auto()


GLYPHS: Dict[ObjectType, str] = {
    ObjectType.PLAYER: "^",
    ObjectType.ENEMY: "o",
}

EMPTY_GLYPH = " "

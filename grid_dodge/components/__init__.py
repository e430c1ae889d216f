"""Aggregate import surface for grid value objects.

Components are frozen dataclasses and enums with no behaviour beyond their
fields; systems read them to move, collide and render entities::

    from grid_dodge.components import Position, ObjectType
"""

from .object_type import GLYPHS, EMPTY_GLYPH, ObjectType
from .position import Position

__all__ = [
    "EMPTY_GLYPH",
    "GLYPHS",
    "ObjectType",
    "Position",
]

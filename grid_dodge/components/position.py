"""Position component.

Immutable integer grid coordinates. The same type doubles as a direction
delta for movement (components in ``{-1, 0, 1}``); deltas are never bounds
checked themselves, only the positions they produce.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

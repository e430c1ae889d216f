"""Game loop.

Each tick draws the world, pushes the frame to the display, blocks on the
input provider and feeds the command to the world. The loop has no exit
command; it stops only when ``max_ticks`` is reached or a collaborator raises.
"""

import logging
from typing import Optional, Protocol

from grid_dodge.input import InputProvider
from grid_dodge.renderer.text import TextRenderer
from grid_dodge.world import World

logger = logging.getLogger(__name__)


class Display(Protocol):
    def show(self, frame: str) -> None: ...


def run(
    world: World,
    input_provider: InputProvider,
    display: Display,
    renderer: Optional[TextRenderer] = None,
    max_ticks: Optional[int] = None,
) -> int:
    """Drive ``world`` until ``max_ticks`` ticks have run (forever if ``None``).

    Returns:
        int: Number of ticks completed.
    """
    if renderer is None:
        renderer = TextRenderer()
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        display.show(renderer.draw(world.state))
        game_input = input_provider.poll_input()
        world.update(game_input)
        ticks += 1
        logger.debug(
            "Tick %d: %r -> %s", ticks, game_input, dict(world.state.description)
        )
    return ticks

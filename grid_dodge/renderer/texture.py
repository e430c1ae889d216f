"""Pillow image renderer.

Paints the same scene index the text renderer uses onto an RGBA image: a
triangle for the player, a disc for each enemy, on a flat background. While
the game is over a translucent shade is composited over the whole board.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from grid_dodge.components import ObjectType
from grid_dodge.renderer import build_scene_index
from grid_dodge.state import State
from grid_dodge.utils.grid import is_in_bounds

DEFAULT_RESOLUTION = 320
DEFAULT_MARGIN_PERCENT = 0.1

Color = Tuple[int, int, int, int]
ColorMap = Dict[ObjectType, Color]

BACKGROUND_COLOR: Color = (24, 24, 32, 255)
GAME_OVER_SHADE: Color = (160, 0, 0, 96)

DEFAULT_COLOR_MAP: ColorMap = {
    ObjectType.PLAYER: (80, 200, 255, 255),
    ObjectType.ENEMY: (255, 170, 40, 255),
}


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    color_map: Optional[ColorMap] = None,
    margin_percent: float = DEFAULT_MARGIN_PERCENT,
) -> Image.Image:
    """Render ``state`` as an RGBA image about ``resolution`` pixels wide.

    The width is rounded down to a whole number of square cells.
    """
    if color_map is None:
        color_map = DEFAULT_COLOR_MAP

    cell_size = max(1, resolution // state.width)
    margin = int(cell_size * margin_percent)
    img = Image.new(
        "RGBA", (state.width * cell_size, state.height * cell_size), BACKGROUND_COLOR
    )
    draw = ImageDraw.Draw(img)

    for pos, object_type in build_scene_index(state).items():
        if not is_in_bounds(state, pos):
            continue
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        x1, y1 = x0 + cell_size - 1, y0 + cell_size - 1
        color = color_map[object_type]
        if object_type == ObjectType.PLAYER:
            apex = ((x0 + x1) // 2, y0 + margin)
            left = (x0 + margin, y1 - margin)
            right = (x1 - margin, y1 - margin)
            draw.polygon([apex, left, right], fill=color)
        else:
            draw.ellipse(
                [x0 + margin, y0 + margin, x1 - margin, y1 - margin], fill=color
            )

    if state.game_over:
        shade = Image.new("RGBA", img.size, GAME_OVER_SHADE)
        img.alpha_composite(shade)

    return img


class TextureRenderer:
    resolution: int
    color_map: ColorMap
    margin_percent: float

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        color_map: Optional[ColorMap] = None,
        margin_percent: float = DEFAULT_MARGIN_PERCENT,
    ):
        self.resolution = resolution
        self.color_map = color_map or DEFAULT_COLOR_MAP
        self.margin_percent = margin_percent

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            color_map=self.color_map,
            margin_percent=self.margin_percent,
        )

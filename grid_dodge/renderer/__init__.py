"""Rendering subpackage.

Turns immutable ``State`` snapshots into something a display can show:

* :mod:`grid_dodge.renderer.text` rasterizes the board to a character frame
  for terminals.
* :mod:`grid_dodge.renderer.texture` paints the same board with Pillow for
  image-based consumers such as the Gymnasium environment.

Both build a fresh scene index (cell to occupant) per call and keep nothing
between frames.
"""

from typing import Dict

from grid_dodge.components import ObjectType, Position
from grid_dodge.state import State

SceneIndex = Dict[Position, ObjectType]


def build_scene_index(state: State) -> SceneIndex:
    """Map every occupied cell to the kind of object drawn there.

    The player is inserted first and enemies after it, so an enemy sharing
    the player's cell overwrites it. Collision clears the player in the same
    tick, so the overlap only shows up for hand-built states.
    """
    scene_index: SceneIndex = {}
    if state.player is not None:
        scene_index[state.player] = ObjectType.PLAYER
    for enemy in state.enemies:
        scene_index[enemy] = ObjectType.ENEMY
    return scene_index

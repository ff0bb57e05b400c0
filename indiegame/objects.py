"""Creating game objects in the active scene."""

from __future__ import annotations

from typing import Optional, TypeVar

from .enums import LayerType
from .game_object import GameObject
from .scene_manager import SceneManager
from .transform import Transform
from .vector import Vector2

G = TypeVar("G", bound=GameObject)

TRANSFORM_NAME = "TR"


def instantiate(
    game_object_cls: type[G],
    layer_type: LayerType,
    position: Optional[Vector2] = None,
) -> G:
    """Create a game object on ``layer_type`` of the active scene.

    With a ``position`` the object's transform is placed there and named.
    Raises RuntimeError when no scene is active.
    """
    scene = SceneManager.active_scene()
    if scene is None:
        raise RuntimeError("no active scene to instantiate into")
    game_object = game_object_cls()
    scene.get_layer(layer_type).add_game_object(game_object)
    if position is not None:
        transform = game_object.get_component(Transform)
        transform.position = Vector2(position.x, position.y)
        transform.name = TRANSFORM_NAME
    return game_object
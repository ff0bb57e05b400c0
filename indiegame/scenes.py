"""The game's title, play and ending scenes."""

from __future__ import annotations

from typing import Any, Optional

from .animator import Animator
from .camera import Camera
from .enums import LayerType
from .game_object import GameObject
from .input import InputManager
from .objects import instantiate
from .player import Player
from .player_script import (
    MOVE_BACK,
    MOVE_FORWARD,
    MOVE_LEFT,
    MOVE_RIGHT,
    PlayerScript,
)
from .resource import ResourceManager
from .scene import Scene
from .scene_manager import SceneManager
from .sprite_renderer import SpriteRenderer
from .texture import Texture
from .vector import Vector2

CHANGE_SCENE = "ChangeScene"

TITLE_SCENE = "TitleScene"
PLAY_SCENE = "PlayScene"
ENDING_SCENE = "EndingScene"

PLAYER_TEXTURE = "Chicken"
BACKGROUND_TEXTURE = "BG"
PLAYER_ANIMATION = "CatFrontMove"

START_POSITION = Vector2(336.0, 423.0)


class TitleScene(Scene):
    """Opening scene; the scene-change key goes to the play scene."""

    def on_late_update(self, delta_time: float) -> None:
        super().on_late_update(delta_time)
        if InputManager.get_instance().get_key_down(CHANGE_SCENE):
            SceneManager.load_scene(PLAY_SCENE)


class PlayScene(Scene):
    """The playable scene: a camera, the player and a background."""

    def __init__(self) -> None:
        super().__init__()
        self.player: Optional[Player] = None

    def on_create(self, engine: Any) -> None:
        """Bind movement keys and populate the scene; it must be the active scene."""
        keys = InputManager.get_instance()
        keys.add_key_info(MOVE_LEFT, "A")
        keys.add_key_info(MOVE_RIGHT, "D")
        keys.add_key_info(MOVE_FORWARD, "W")
        keys.add_key_info(MOVE_BACK, "S")

        super().on_create(engine)

        camera = instantiate(GameObject, LayerType.NONE, START_POSITION)
        Camera.main = camera.add_component(Camera)

        self.player = instantiate(Player, LayerType.PLAYER, START_POSITION)
        self.player.add_component(PlayerScript)

        player_image = ResourceManager.find(PLAYER_TEXTURE, Texture)
        animator = self.player.add_component(Animator)
        animator.create_animation(
            PLAYER_ANIMATION,
            player_image,
            Vector2(0.0, 0.0),
            Vector2(32.0, 32.0),
            Vector2(0.0, 0.0),
            4,
            0.5,
        )
        animator.play_animation(PLAYER_ANIMATION, True)

        background = instantiate(GameObject, LayerType.BACKGROUND, Vector2(0.0, 0.0))
        renderer = background.get_component(SpriteRenderer)
        renderer.texture = ResourceManager.find(BACKGROUND_TEXTURE, Texture)
        renderer.name = "SR"
        renderer.size = Vector2(3.0, 3.0)

    def on_late_update(self, delta_time: float) -> None:
        super().on_late_update(delta_time)
        if InputManager.get_instance().get_key_down(CHANGE_SCENE):
            SceneManager.load_scene(TITLE_SCENE)


class EndingScene(Scene):
    """Closing scene with no content of its own."""
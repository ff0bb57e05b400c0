"""The game itself: its resources, its scenes and the command that runs it."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from .engine import DEFAULT_TITLE, Engine
from .input import InputManager
from .resource import ResourceManager
from .scene_manager import SceneManager
from .scenes import (
    CHANGE_SCENE,
    ENDING_SCENE,
    PLAY_SCENE,
    TITLE_SCENE,
    EndingScene,
    PlayScene,
    TitleScene,
)
from .texture import Texture

DEFAULT_RESOURCE_DIR = Path("../resources")

MAP_TEXTURE = "MAP"
MAP_FILE = "blue_sky.png"
CHICKEN_TEXTURE = "Chicken"
CHICKEN_FILE = Path("Sprites") / "ChickenAlpha.bmp"

CHANGE_SCENE_KEY = "N"


class GameEngine(Engine):
    """Loads the game's textures and scenes and runs the active scene."""

    def __init__(self, resource_dir: Union[str, Path] = DEFAULT_RESOURCE_DIR) -> None:
        super().__init__()
        self.resource_dir = Path(resource_dir)

    def on_create(self) -> None:
        """Load resources and scenes, bind the scene-change key, create the active scene."""
        self.load_resources()
        self.load_scenes()
        InputManager.get_instance().add_key_info(CHANGE_SCENE, CHANGE_SCENE_KEY)
        SceneManager.on_create(self)

    def on_destroy(self) -> None:
        SceneManager.on_destroy()

    def on_update(self, delta_time: float) -> None:
        """Draw the frame, then update the active scene."""
        self.render()
        SceneManager.on_update(delta_time)

    def on_late_update(self, delta_time: float) -> None:
        SceneManager.on_late_update(delta_time)

    def render(self) -> None:
        """Clear to grey, draw the active scene into the back buffer and show it."""
        self.clear(0.5, 0.5, 0.5)
        SceneManager.render(self._require_back_buffer())
        self.present()

    def load_scenes(self) -> None:
        """Create the title, play and ending scenes and start on the play scene."""
        SceneManager.create_scene(self, TitleScene, TITLE_SCENE)
        SceneManager.create_scene(self, PlayScene, PLAY_SCENE)
        SceneManager.create_scene(self, EndingScene, ENDING_SCENE)
        SceneManager.load_scene(PLAY_SCENE)

    def load_resources(self) -> None:
        """Load the game's textures; raises OSError if one cannot be read."""
        ResourceManager.load(self, MAP_TEXTURE, str(self.resource_dir / MAP_FILE), Texture)
        ResourceManager.load(
            self, CHICKEN_TEXTURE, str(self.resource_dir / CHICKEN_FILE), Texture
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="indiegame", description="Run the game.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames",
    )
    parser.add_argument(
        "--resources",
        default=str(DEFAULT_RESOURCE_DIR),
        help="directory holding the game's images",
    )
    args = parser.parse_args(argv)
    engine = GameEngine(args.resources)
    engine.create(DEFAULT_TITLE)
    return engine.run(args.frames)
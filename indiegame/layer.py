"""Layers: ordered groups of game objects within a scene."""

from __future__ import annotations

from typing import Any, Optional

from .entity import Entity


class Layer(Entity):
    """Holds game objects and forwards lifecycle calls to them in insertion order."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.game_objects: list[Any] = []

    def on_create(self) -> None:
        for game_object in self.game_objects:
            game_object.on_create()

    def on_destroy(self) -> None:
        for game_object in self.game_objects:
            game_object.on_destroy()

    def on_update(self, delta_time: float) -> None:
        for game_object in self.game_objects:
            game_object.on_update(delta_time)

    def on_late_update(self, delta_time: float) -> None:
        for game_object in self.game_objects:
            game_object.on_late_update(delta_time)

    def render(self, surface: Any) -> None:
        for game_object in self.game_objects:
            game_object.render(surface)

    def add_game_object(self, game_object: Optional[Any]) -> None:
        """Append ``game_object``; None is ignored."""
        if game_object is None:
            return
        self.game_objects.append(game_object)
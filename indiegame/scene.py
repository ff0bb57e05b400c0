"""Scenes: a fixed stack of layers of game objects."""

from __future__ import annotations

from typing import Any

from .entity import Entity
from .enums import LayerType
from .layer import Layer


class Scene(Entity):
    """Holds one layer per layer slot and forwards lifecycle calls to them in order."""

    def __init__(self) -> None:
        super().__init__()
        self._layers: list[Layer] = [Layer() for _ in range(LayerType.MAX)]
        self._entered = False

    @property
    def layers(self) -> list[Layer]:
        """All layers, lowest first."""
        return list(self._layers)

    @property
    def entered(self) -> bool:
        """True between on_enter and the following on_exit."""
        return self._entered

    def on_create(self, engine: Any) -> None:
        for layer in self._layers:
            layer.on_create()

    def on_destroy(self) -> None:
        for layer in self._layers:
            layer.on_destroy()

    def on_update(self, delta_time: float) -> None:
        for layer in self._layers:
            layer.on_update(delta_time)

    def on_late_update(self, delta_time: float) -> None:
        for layer in self._layers:
            layer.on_late_update(delta_time)

    def render(self, surface: Any) -> None:
        for layer in self._layers:
            layer.render(surface)

    def on_enter(self) -> None:
        """Called when the scene becomes active."""
        self._entered = True

    def on_exit(self) -> None:
        """Called when the scene stops being active."""
        self._entered = False

    def add_game_object(self, game_object: Any, layer_type: LayerType) -> None:
        """Put ``game_object`` on the layer ``layer_type``."""
        self.get_layer(layer_type).add_game_object(game_object)

    def get_layer(self, layer_type: LayerType) -> Layer:
        """Return the layer for ``layer_type``; raises IndexError if out of range."""
        return self._layers[layer_type]
"""Component that owns named animations and plays one at a time."""

from __future__ import annotations

from typing import Any, Optional

from .animation import Animation
from .component import Component
from .enums import ComponentType
from .texture import Texture
from .vector import Vector2


class Animator(Component):
    """Keeps animations by name and drives the active one."""

    def __init__(self) -> None:
        super().__init__(ComponentType.ANIMATOR)
        self.animations: dict[str, Animation] = {}
        self.active_animation: Optional[Animation] = None
        self.loop = False

    def on_update(self, delta_time: float) -> None:
        """Advance the active animation, restarting it when looping."""
        if self.active_animation is None:
            return
        self.active_animation.on_update(delta_time)
        if self.active_animation.complete and self.loop:
            self.active_animation.reset()

    def render(self, surface: Any) -> None:
        if self.active_animation is not None:
            self.active_animation.render(surface)

    def create_animation(
        self,
        name: str,
        sprite_sheet: Optional[Texture],
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Build and register an animation; a name already in use is left unchanged."""
        if name in self.animations:
            return
        animation = Animation()
        animation.create_animation(
            name, sprite_sheet, left_top, size, offset, sprite_length, duration
        )
        animation.animator = self
        self.animations[name] = animation

    def find_animation(self, name: str) -> Optional[Animation]:
        """Return the animation registered as ``name``, or None."""
        return self.animations.get(name)

    def play_animation(self, name: str, loop: bool = True) -> None:
        """Start ``name`` from its first frame; unknown names are ignored."""
        animation = self.find_animation(name)
        if animation is None:
            return
        self.active_animation = animation
        animation.reset()
        self.loop = loop
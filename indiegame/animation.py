"""Frame-by-frame sprite-sheet animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pygame

from .camera import Camera
from .enums import ResourceType
from .resource import Resource
from .texture import Texture
from .transform import Transform
from .vector import Vector2

# Frames are drawn at this multiple of their size on the sheet.
SPRITE_SCALE = 5


@dataclass
class Sprite:
    """One frame: a rectangle on the sheet shown for ``duration`` seconds."""

    left_top: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    offset: Vector2 = field(default_factory=Vector2)
    duration: float = 0.0


class Animation(Resource):
    """A sequence of sprites cut from a row of a sprite sheet."""

    def __init__(self) -> None:
        super().__init__(ResourceType.ANIMATION)
        self.animator: Optional[Any] = None
        self.texture: Optional[Texture] = None
        self.sheet: list[Sprite] = []
        self.index = -1
        self.time = 0.0
        self.complete = False

    def load(self, engine: Any, path: str) -> None:
        """Animations are built with :meth:`create_animation`, not read from files."""
        raise OSError(f"cannot load animation from {path!r}; use create_animation")

    def on_update(self, delta_time: float) -> None:
        """Advance time and step to the next frame once the current one has run out."""
        if self.complete:
            return
        self.time += delta_time
        if self.sheet[self.index].duration < self.time:
            self.time = 0.0
            if self.index < len(self.sheet) - 1:
                self.index += 1
            else:
                self.complete = True

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current frame, scaled up, at the animator owner's position."""
        if self.texture is None or self.texture.image is None:
            return
        pos = self.animator.owner.get_component(Transform).position
        if Camera.main is not None:
            pos = Camera.main.calculate_position(pos)
        sprite = self.sheet[self.index]
        area = pygame.Rect(
            int(sprite.left_top.x),
            int(sprite.left_top.y),
            int(sprite.size.x),
            int(sprite.size.y),
        )
        frame = self.texture.image.subsurface(area)
        scaled = pygame.transform.scale(
            frame,
            (int(sprite.size.x * SPRITE_SCALE), int(sprite.size.y * SPRITE_SCALE)),
        )
        surface.blit(scaled, (int(pos.x), int(pos.y)))

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
        """Append ``sprite_length`` frames laid out left to right from ``left_top``."""
        self.name = name
        self.texture = sprite_sheet
        self.sheet.extend(
            Sprite(
                left_top=Vector2(left_top.x + size.x * i, left_top.y),
                size=size,
                offset=offset,
                duration=duration,
            )
            for i in range(sprite_length)
        )

    def reset(self) -> None:
        """Go back to the first frame."""
        self.time = 0.0
        self.index = 0
        self.complete = False
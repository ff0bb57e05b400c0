"""Component that draws a texture at its owner's position."""

from __future__ import annotations

from typing import Optional

import pygame

from .camera import Camera
from .component import Component
from .enums import ComponentType
from .texture import Texture, TextureType
from .transform import Transform
from .vector import Vector2


class SpriteRenderer(Component):
    """Draws a texture through the main camera.

    Bitmaps are drawn at their own size with the colour key; PNG images are
    stretched by ``size``.
    """

    def __init__(self) -> None:
        super().__init__(ComponentType.SPRITE_RENDERER)
        self.texture: Optional[Texture] = None
        self.size = Vector2(1.0, 1.0)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the texture onto ``surface``; raises RuntimeError without a main camera."""
        if self.texture is None:
            return
        camera = Camera.main
        if camera is None:
            raise RuntimeError("no main camera to render through")
        pos = camera.calculate_position(self.owner.get_component(Transform).position)
        image = self.texture.image
        if image is None:
            return
        dest = (int(pos.x), int(pos.y))
        if self.texture.texture_type is TextureType.BMP:
            surface.blit(image, dest)
        elif self.texture.texture_type is TextureType.PNG:
            scaled_size = (
                int(self.texture.width * self.size.x),
                int(self.texture.height * self.size.y),
            )
            surface.blit(pygame.transform.scale(image, scaled_size), dest)
"""Image resources loaded from BMP or PNG files."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import pygame

from .enums import ResourceType
from .resource import Resource

# Colour treated as transparent in bitmap sprite sheets.
BMP_COLOR_KEY = (255, 0, 255)


class TextureType(Enum):
    """How a texture was loaded, which decides how it is drawn."""

    BMP = "bmp"
    PNG = "png"
    NONE = "none"


class Texture(Resource):
    """An image held as a pygame surface."""

    def __init__(self) -> None:
        super().__init__(ResourceType.TEXTURE)
        self.texture_type = TextureType.NONE
        self.image: Optional[pygame.Surface] = None
        self.width = 0
        self.height = 0

    def load(self, engine: Any, path: str) -> None:
        """Load a ``.bmp`` or ``.png`` file; other extensions load nothing.

        Raises OSError if the file cannot be read as an image.
        """
        extension = path.rpartition(".")[2] if path else ""
        if extension == "bmp":
            texture_type = TextureType.BMP
        elif extension == "png":
            texture_type = TextureType.PNG
        else:
            return

        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise OSError(f"cannot load texture {path!r}") from exc

        if texture_type is TextureType.BMP:
            image.set_colorkey(BMP_COLOR_KEY)
        self.texture_type = texture_type
        self.image = image
        self.width, self.height = image.get_size()

    def unload(self) -> None:
        """Release the image."""
        self.image = None
        self.width = 0
        self.height = 0

    def create_back_buffer(self, width: int, height: int) -> pygame.Surface:
        """Make an off-screen surface of the given size to draw frames into."""
        self.image = pygame.Surface((width, height))
        return self.image
"""Camera component that turns world positions into screen positions."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from .component import Component
from .enums import WINDOW_HEIGHT, WINDOW_WIDTH, ComponentType
from .transform import Transform
from .vector import Vector2


class Camera(Component):
    """Centres the view on its owner's position.

    ``Camera.main`` is the camera that renderers draw through.
    """

    main: ClassVar[Optional[Camera]] = None

    def __init__(self) -> None:
        super().__init__(ComponentType.CAMERA)
        self.distance = Vector2(0.0, 0.0)
        self.resolution = Vector2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        self.look_position = Vector2(0.0, 0.0)
        self.target: Optional[Any] = None

    def calculate_position(self, pos: Vector2) -> Vector2:
        """Return the screen position of the world position ``pos``."""
        return pos - self.distance

    def on_update(self, delta_time: float) -> None:
        """Recompute the view offset from the owner's position."""
        if self.target is not None:
            self.look_position = self.target.get_component(Transform).position
        self.look_position = self.owner.get_component(Transform).position
        self.distance = self.look_position - self.resolution / 2.0
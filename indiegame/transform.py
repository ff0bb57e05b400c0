"""Position and velocity of a game object."""

from __future__ import annotations

from .component import Component
from .enums import ComponentType
from .vector import Vector2


class Transform(Component):
    """Holds where a game object is and how fast it moves."""

    def __init__(self) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.position = Vector2(0.0, 0.0)
        self.velocity = Vector2(0.0, 0.0)
        self.radius = 0.0

    def on_update(self, delta_time: float) -> None:
        """Move by the velocity over ``delta_time`` seconds."""
        self.position = self.position + self.velocity * delta_time
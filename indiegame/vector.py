"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Single-precision machine epsilon; lengths below this count as zero.
FLOAT_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        inverse = 1 / scalar
        return Vector2(self.x * inverse, self.y * inverse)

    def dot(self, other: Vector2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector2:
        """Return the unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length < FLOAT_EPSILON:
            return Vector2(0.0, 0.0)
        return self * (1.0 / length)
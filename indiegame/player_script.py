"""Script that moves its owner from keyboard input."""

from __future__ import annotations

from .input import InputManager
from .script import Script
from .transform import Transform
from .vector import Vector2

MOVE_LEFT = "DoMoveLt"
MOVE_RIGHT = "DoMoveRt"
MOVE_FORWARD = "DoMoveFt"
MOVE_BACK = "DoMoveBt"

PLAYER_SPEED = 300.0


class PlayerScript(Script):
    """Sets the owner's velocity from the held movement keys."""

    def on_update(self, delta_time: float) -> None:
        """Each held direction adds one unit on its axis, scaled by PLAYER_SPEED."""
        keys = InputManager.get_instance()
        x = 0.0
        y = 0.0
        if keys.get_key_pressed(MOVE_LEFT):
            x -= 1.0
        if keys.get_key_pressed(MOVE_RIGHT):
            x += 1.0
        if keys.get_key_pressed(MOVE_FORWARD):
            y -= 1.0
        if keys.get_key_pressed(MOVE_BACK):
            y += 1.0
        self.owner.get_component(Transform).velocity = Vector2(x, y) * PLAYER_SPEED
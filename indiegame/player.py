"""The player-controlled game object."""

from __future__ import annotations

from .game_object import GameObject
from .player_script import PlayerScript


class Player(GameObject):
    """A game object that gains keyboard movement when created."""

    def on_create(self) -> None:
        """Create components, then attach a PlayerScript."""
        super().on_create()
        self.add_component(PlayerScript)
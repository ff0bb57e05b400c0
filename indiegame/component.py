"""Base class for behaviour attached to a game object."""

from __future__ import annotations

from typing import Any, Optional

from .entity import Entity
from .enums import ComponentType


class Component(Entity):
    """A piece of behaviour with lifecycle hooks, owned by one game object.

    The hooks do nothing by default; subclasses override what they need.
    """

    def __init__(self, kind: ComponentType) -> None:
        super().__init__()
        self._kind = kind
        self.owner: Optional[Any] = None

    @property
    def kind(self) -> ComponentType:
        """The slot this component occupies on its owner."""
        return self._kind

    def on_create(self) -> None:
        """Called once after the component is made."""

    def on_destroy(self) -> None:
        """Called when the owner is destroyed."""

    def on_update(self, delta_time: float) -> None:
        """Called every frame."""

    def on_late_update(self, delta_time: float) -> None:
        """Called every frame after all updates."""

    def render(self, surface: Any) -> None:
        """Draw onto ``surface``."""
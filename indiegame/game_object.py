"""Game objects: a set of components, one per component slot."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from .component import Component
from .enums import ComponentType
from .sprite_renderer import SpriteRenderer
from .transform import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """Holds components and forwards lifecycle calls to them in slot order.

    Every game object starts with a Transform and a SpriteRenderer.
    """

    def __init__(self) -> None:
        self._components: list[Optional[Component]] = [None] * ComponentType.END
        self.add_component(Transform)
        self.add_component(SpriteRenderer)

    def add_component(self, component_cls: type[C]) -> C:
        """Create a component, attach it and put it in its slot, replacing any there."""
        component = component_cls()
        component.on_create()
        component.owner = self
        self._components[component.kind] = component
        return component

    def get_component(self, component_cls: type[C]) -> Optional[C]:
        """Return the first attached component that is a ``component_cls``."""
        return next(
            (c for c in self._components if isinstance(c, component_cls)),
            None,
        )

    def _attached(self) -> list[Component]:
        return [c for c in self._components if c is not None]

    def on_create(self) -> None:
        for component in self._attached():
            component.on_create()

    def on_destroy(self) -> None:
        """Destroy every component and detach them all."""
        for component in self._attached():
            component.on_destroy()
        self._components = [None] * ComponentType.END

    def on_update(self, delta_time: float) -> None:
        for component in self._attached():
            component.on_update(delta_time)

    def on_late_update(self, delta_time: float) -> None:
        for component in self._attached():
            component.on_late_update(delta_time)

    def render(self, surface: Any) -> None:
        for component in self._attached():
            component.render(surface)
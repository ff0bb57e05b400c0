"""Registry of named scenes with one active scene."""

from __future__ import annotations

from typing import Any, ClassVar, Optional, TypeVar

from .scene import Scene

S = TypeVar("S", bound=Scene)


class SceneManager:
    """Creates, switches and drives scenes; all state is shared."""

    _scenes: ClassVar[dict[str, Scene]] = {}
    _active: ClassVar[Optional[Scene]] = None

    @classmethod
    def create_scene(cls, engine: Any, scene_cls: type[S], name: str) -> S:
        """Make a scene, activate it, create it and register it under ``name``.

        A name already registered keeps its first scene.
        """
        scene = scene_cls()
        scene.name = name
        cls._active = scene
        scene.on_create(engine)
        cls._scenes.setdefault(name, scene)
        return scene

    @classmethod
    def load_scene(cls, name: str) -> Scene:
        """Exit the active scene and enter the one named ``name``.

        Raises KeyError if no such scene is registered.
        """
        if cls._active is not None:
            cls._active.on_exit()
        try:
            scene = cls._scenes[name]
        except KeyError:
            raise KeyError(f"no scene named {name!r}") from None
        cls._active = scene
        scene.on_enter()
        return scene

    @classmethod
    def active_scene(cls) -> Optional[Scene]:
        """Return the active scene, or None."""
        return cls._active

    @classmethod
    def _require_active(cls) -> Scene:
        if cls._active is None:
            raise RuntimeError("no active scene")
        return cls._active

    @classmethod
    def on_create(cls, engine: Any) -> None:
        cls._require_active().on_create(engine)

    @classmethod
    def on_destroy(cls) -> None:
        """Destroy the active scene and drop it."""
        scene = cls._require_active()
        scene.on_destroy()
        for key in [k for k, v in cls._scenes.items() if v is scene]:
            del cls._scenes[key]
        cls._active = None

    @classmethod
    def on_update(cls, delta_time: float) -> None:
        cls._require_active().on_update(delta_time)

    @classmethod
    def on_late_update(cls, delta_time: float) -> None:
        cls._require_active().on_late_update(delta_time)

    @classmethod
    def render(cls, surface: Any) -> None:
        cls._require_active().render(surface)

    @classmethod
    def clear(cls) -> None:
        """Forget every scene."""
        cls._scenes.clear()
        cls._active = None
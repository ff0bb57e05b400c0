"""Loadable resources and the registry that caches them by key."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, TypeVar

from .entity import Entity
from .enums import ResourceType

R = TypeVar("R", bound="Resource")


class Resource(Entity, ABC):
    """Something loaded from a path; subclasses raise from :meth:`load` on failure."""

    def __init__(self, kind: ResourceType) -> None:
        super().__init__()
        self._kind = kind
        self.path = ""

    @property
    def kind(self) -> ResourceType:
        """The resource category."""
        return self._kind

    @abstractmethod
    def load(self, engine: Any, path: str) -> None:
        """Load the resource's data from ``path``."""


class ResourceManager:
    """Registry of loaded resources keyed by name."""

    _resources: ClassVar[dict[str, Resource]] = {}

    @classmethod
    def find(cls, key: str, kind: type[R]) -> Optional[R]:
        """Return the resource under ``key`` if it is a ``kind``, else None."""
        resource = cls._resources.get(key)
        if isinstance(resource, kind):
            return resource
        return None

    @classmethod
    def load(cls, engine: Any, key: str, path: str, kind: type[R]) -> R:
        """Return the cached resource under ``key`` or load a new ``kind`` from ``path``."""
        resource = cls.find(key, kind)
        if resource is not None:
            return resource
        resource = kind()
        resource.load(engine, path)
        resource.name = key
        resource.path = path
        cls._resources.setdefault(key, resource)
        return resource

    @classmethod
    def clear(cls) -> None:
        """Forget every registered resource."""
        cls._resources.clear()
"""Base component for game-specific behaviour."""

from __future__ import annotations

from .component import Component
from .enums import ComponentType


class Script(Component):
    """A component in the script slot; subclasses supply the behaviour."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SCRIPT)
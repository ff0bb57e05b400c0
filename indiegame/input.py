"""Named key bindings with a per-frame down/pressed/up state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Union

Key = Union[int, str]


class KeyState(Enum):
    """State of a bound key in the current frame."""

    DOWN = "down"
    PRESSED = "pressed"
    UP = "up"
    NONE = "none"


@dataclass
class KeyInfo:
    """A binding from a name to a key code, with its current state."""

    name: str
    key: int
    state: KeyState = KeyState.NONE
    pressed: bool = False


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise TypeError(f"key must be a single character, got {key!r}")
        return ord(key)
    if isinstance(key, int):
        return key
    raise TypeError(f"key must be a character or an integer code, got {type(key).__name__}")


class InputManager:
    """Tracks named key bindings; one shared instance via :meth:`get_instance`."""

    _instance: ClassVar[Optional[InputManager]] = None

    def __init__(self) -> None:
        self._keys: dict[str, KeyInfo] = {}

    @classmethod
    def get_instance(cls) -> InputManager:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def release_instance(cls) -> None:
        """Drop the shared instance and all its bindings."""
        cls._instance = None

    def add_key_info(self, name: str, key: Key) -> bool:
        """Bind ``name`` to ``key``; an existing binding of that name is kept."""
        code = _key_code(key)
        self._keys.setdefault(name, KeyInfo(name=name, key=code))
        return True

    def change_key_info(self, name: str, key: Key) -> bool:
        """Rebind an existing name to another key; raises KeyError if unbound."""
        code = _key_code(key)
        try:
            info = self._keys[name]
        except KeyError:
            raise KeyError(f"no key bound to {name!r}") from None
        info.key = code
        return True

    def update(self, is_down: Callable[[int], bool]) -> None:
        """Advance every binding one frame; ``is_down(code)`` says if a key is held."""
        for info in self._keys.values():
            if is_down(info.key):
                if info.state is KeyState.NONE:
                    info.state = KeyState.DOWN
                elif info.state is KeyState.DOWN and not info.pressed:
                    info.state = KeyState.PRESSED
                    info.pressed = True
            elif info.state in (KeyState.DOWN, KeyState.PRESSED):
                info.state = KeyState.UP
                info.pressed = False
            elif info.state is KeyState.UP:
                info.state = KeyState.NONE

    def _is_in_state(self, name: str, state: KeyState) -> bool:
        info = self._keys.get(name)
        return info is not None and info.state is state

    def get_key_down(self, name: str) -> bool:
        """True in the frame the bound key went down."""
        return self._is_in_state(name, KeyState.DOWN)

    def get_key_pressed(self, name: str) -> bool:
        """True while the bound key is held after its first frame."""
        return self._is_in_state(name, KeyState.PRESSED)

    def get_key_up(self, name: str) -> bool:
        """True in the frame the bound key was released."""
        return self._is_in_state(name, KeyState.UP)
"""Enumerations and window constants shared across the engine."""

from enum import IntEnum

WINDOW_WIDTH = 672
WINDOW_HEIGHT = 846


class ComponentType(IntEnum):
    """Component slots; each game object holds at most one of each."""

    TRANSFORM = 0
    SPRITE_RENDERER = 1
    ANIMATOR = 2
    SCRIPT = 3
    CAMERA = 4
    END = 5


class LayerType(IntEnum):
    """Scene layers, drawn in ascending order."""

    NONE = 0
    BACKGROUND = 1
    PLAYER = 2
    MAX = 16


class ResourceType(IntEnum):
    """Kinds of loadable resource."""

    TEXTURE = 0
    AUDIO_CLIP = 1
    ANIMATION = 2
    PREFAB = 3
    END = 4
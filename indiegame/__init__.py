"""A component-based 2D game engine on pygame, with scenes, layers, sprite animation, keyboard input and a sample game."""

__version__ = "0.1.0"
"""Window, frame loop and back buffer shared by every game."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

import pygame

from .enums import WINDOW_HEIGHT, WINDOW_WIDTH
from .input import InputManager
from .texture import Texture

DEFAULT_TITLE = "MyTestClass"
EXIT_SUCCESS = 0


def _pygame_key_is_down(code: int) -> bool:
    """Report whether the key with virtual-key ``code`` is held."""
    if ord("A") <= code <= ord("Z"):
        code = ord(chr(code).lower())
    try:
        return bool(pygame.key.get_pressed()[code])
    except IndexError:
        return False


class Engine(ABC):
    """Opens a window, drives the frame loop and owns the back buffer.

    Subclasses supply the lifecycle hooks and the frame rendering.
    """

    def __init__(self) -> None:
        self.title = ""
        self.screen: Optional[pygame.Surface] = None
        self.back_buffer: Optional[Texture] = None
        self.delta_time = 0.0
        self.frame_count = 0
        self.key_source: Callable[[int], bool] = _pygame_key_is_down

    def create(self, title: str = DEFAULT_TITLE) -> pygame.Surface:
        """Open the window and make the back buffer frames are drawn into."""
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(title)
        self.title = title
        self.back_buffer = Texture()
        self.back_buffer.create_back_buffer(WINDOW_WIDTH, WINDOW_HEIGHT)
        return self.screen

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until the window is closed or ``max_frames`` have run.

        Returns the exit code. Raises RuntimeError if :meth:`create` was not called.
        """
        if self.screen is None:
            raise RuntimeError("create() must be called before run()")
        InputManager.get_instance()
        self.frame_count = 0
        try:
            self.on_create()
            previous = time.perf_counter()
            while max_frames is None or self.frame_count < max_frames:
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                now = time.perf_counter()
                self.delta_time = now - previous
                previous = now
                self.step(self.delta_time)
                self.frame_count += 1
            self.on_destroy()
        finally:
            InputManager.release_instance()
            if self.back_buffer is not None:
                self.back_buffer.unload()
                self.back_buffer = None
            self.screen = None
            pygame.quit()
        return EXIT_SUCCESS

    def step(self, delta_time: float) -> None:
        """Run one frame: read input, then update and late-update."""
        InputManager.get_instance().update(self.key_source)
        self.on_update(delta_time)
        self.on_late_update(delta_time)

    def _require_back_buffer(self) -> pygame.Surface:
        if self.back_buffer is None or self.back_buffer.image is None:
            raise RuntimeError("no back buffer; call create() first")
        return self.back_buffer.image

    def clear(self, r: float = 1.0, g: float = 1.0, b: float = 1.0) -> None:
        """Fill the back buffer with a colour given as fractions of full intensity."""
        colour = (int(r * 255), int(g * 255), int(b * 255))
        self._require_back_buffer().fill(colour)

    def present(self) -> None:
        """Copy the back buffer to the window."""
        buffer = self._require_back_buffer()
        if self.screen is None:
            raise RuntimeError("no window; call create() first")
        self.screen.blit(buffer, (0, 0))
        pygame.display.flip()

    @abstractmethod
    def on_create(self) -> None:
        """Called once before the first frame."""

    @abstractmethod
    def on_destroy(self) -> None:
        """Called once after the last frame."""

    @abstractmethod
    def on_update(self, delta_time: float) -> None:
        """Called every frame."""

    @abstractmethod
    def on_late_update(self, delta_time: float) -> None:
        """Called every frame after :meth:`on_update`."""

    @abstractmethod
    def render(self) -> None:
        """Draw a frame."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from indiegame.engine import DEFAULT_TITLE, EXIT_SUCCESS, Engine
from indiegame.enums import WINDOW_HEIGHT, WINDOW_WIDTH
from indiegame.input import InputManager


class RecordingEngine(Engine):
    def __init__(self, post_quit=False):
        super().__init__()
        self.calls = []
        self.deltas = []
        self.post_quit = post_quit

    def on_create(self):
        self.calls.append("create")
        if self.post_quit:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def on_destroy(self):
        self.calls.append("destroy")

    def on_update(self, delta_time):
        self.calls.append("update")
        self.deltas.append(delta_time)

    def on_late_update(self, delta_time):
        self.calls.append("late")

    def render(self):
        self.calls.append("render")


@pytest.fixture(autouse=True)
def _reset():
    InputManager.release_instance()
    yield
    InputManager.release_instance()
    pygame.quit()


def test_create_opens_window_of_source_size():
    engine = RecordingEngine()
    screen = Engine.create(engine)
    assert screen.get_size() == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert engine.title == DEFAULT_TITLE
    assert engine.back_buffer.image.get_size() == (WINDOW_WIDTH, WINDOW_HEIGHT)


def test_run_without_create_raises():
    with pytest.raises(RuntimeError):
        Engine.run(RecordingEngine(), 1)


def test_run_calls_hooks_in_order():
    engine = RecordingEngine()
    Engine.create(engine)
    assert Engine.run(engine, max_frames=3) == EXIT_SUCCESS
    assert engine.calls == ["create"] + ["update", "late"] * 3 + ["destroy"]
    assert engine.frame_count == 3
    assert all(delta >= 0.0 for delta in engine.deltas)


def test_run_stops_on_quit_event():
    engine = RecordingEngine(post_quit=True)
    Engine.create(engine)
    assert Engine.run(engine) == EXIT_SUCCESS
    assert engine.calls == ["create", "destroy"]
    assert engine.frame_count == 0


def test_run_releases_resources():
    engine = RecordingEngine()
    engine.create()
    before = InputManager.get_instance()
    before.add_key_info("Jump", "J")
    engine.run(max_frames=1)
    assert engine.back_buffer is None
    assert engine.screen is None
    after = InputManager.get_instance()
    assert after is not before
    assert after.get_key_down("Jump") is False


def test_step_updates_input_and_hooks():
    engine = RecordingEngine()
    engine.create()
    engine.key_source = lambda code: code == ord("A")
    keys = InputManager.get_instance()
    keys.add_key_info("Left", "A")
    keys.add_key_info("Right", "D")
    engine.step(0.25)
    assert keys.get_key_down("Left") is True
    assert keys.get_key_down("Right") is False
    assert engine.calls == ["update", "late"]
    assert engine.deltas == [0.25]


def test_clear_fills_back_buffer():
    engine = RecordingEngine()
    Engine.create(engine)
    Engine.clear(engine, 0.5, 0.5, 0.5)
    assert engine.back_buffer.image.get_at((0, 0))[:3] == (127, 127, 127)
    Engine.clear(engine)
    assert engine.back_buffer.image.get_at((10, 10))[:3] == (255, 255, 255)


def test_present_copies_back_buffer_to_screen():
    engine = RecordingEngine()
    Engine.create(engine)
    Engine.clear(engine, 0.0, 1.0, 0.0)
    Engine.present(engine)
    assert engine.screen.get_at((5, 5)) == engine.back_buffer.image.get_at((5, 5))


def test_clear_and_present_without_create_raise():
    engine = RecordingEngine()
    with pytest.raises(RuntimeError):
        Engine.clear(engine)
    with pytest.raises(RuntimeError):
        Engine.present(engine)
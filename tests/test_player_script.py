import pytest

from indiegame.enums import ComponentType
from indiegame.game_object import GameObject
from indiegame.input import InputManager
from indiegame.player_script import PLAYER_SPEED, PlayerScript
from indiegame.transform import Transform
from indiegame.vector import Vector2


@pytest.fixture
def keys():
    InputManager.release_instance()
    manager = InputManager.get_instance()
    manager.add_key_info("DoMoveLt", "A")
    manager.add_key_info("DoMoveRt", "D")
    manager.add_key_info("DoMoveFt", "W")
    manager.add_key_info("DoMoveBt", "S")
    yield manager
    InputManager.release_instance()


def hold(manager, *chars, frames=2):
    codes = {ord(c) for c in chars}
    for _ in range(frames):
        manager.update(lambda code: code in codes)


def make_player():
    obj = GameObject()
    return obj, obj.add_component(PlayerScript)


def velocity_of(obj):
    return obj.get_component(Transform).velocity


def test_is_a_script():
    assert PlayerScript().kind is ComponentType.SCRIPT


def test_no_keys_means_standing_still(keys):
    obj, script = make_player()
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(0.0, 0.0)


def test_held_left_moves_left(keys):
    obj, script = make_player()
    hold(keys, "A")
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(-PLAYER_SPEED, 0.0)


def test_held_back_moves_down(keys):
    obj, script = make_player()
    hold(keys, "S")
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(0.0, PLAYER_SPEED)


def test_first_frame_of_press_does_not_move(keys):
    obj, script = make_player()
    hold(keys, "D", frames=1)
    assert keys.get_key_down("DoMoveRt")
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(0.0, 0.0)


def test_opposite_keys_cancel(keys):
    obj, script = make_player()
    hold(keys, "A", "D")
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(0.0, 0.0)


def test_diagonal_adds_both_axes(keys):
    obj, script = make_player()
    hold(keys, "A", "W")
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(-PLAYER_SPEED, -PLAYER_SPEED)


def test_unbound_keys_do_nothing():
    InputManager.release_instance()
    obj, script = make_player()
    script.on_update(0.1)
    assert velocity_of(obj) == Vector2(0.0, 0.0)
    InputManager.release_instance()
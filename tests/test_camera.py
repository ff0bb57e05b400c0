from indiegame.camera import Camera
from indiegame.enums import WINDOW_HEIGHT, WINDOW_WIDTH, ComponentType
from indiegame.game_object import GameObject
from indiegame.transform import Transform
from indiegame.vector import Vector2


def make_camera_at(position):
    obj = GameObject()
    obj.get_component(Transform).position = position
    return obj, obj.add_component(Camera)


def test_new_camera_is_identity():
    cam = Camera()
    assert cam.kind is ComponentType.CAMERA
    assert cam.calculate_position(Vector2(7.0, 9.0)) == Vector2(7.0, 9.0)
    assert cam.resolution == Vector2(WINDOW_WIDTH, WINDOW_HEIGHT)


def test_resolution_is_window_size():
    assert Camera().resolution == Vector2(672.0, 846.0)


def test_owner_position_maps_to_screen_centre():
    _, cam = make_camera_at(Vector2(400.0, 500.0))
    cam.on_update(0.016)
    centre = Vector2(WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0)
    assert cam.calculate_position(Vector2(400.0, 500.0)) == centre
    assert cam.look_position == Vector2(400.0, 500.0)


def test_offsets_are_preserved_relative_to_centre():
    _, cam = make_camera_at(Vector2(1000.0, -200.0))
    cam.on_update(0.0)
    a = cam.calculate_position(Vector2(1000.0, -200.0))
    b = cam.calculate_position(Vector2(1010.0, -195.0))
    assert b - a == Vector2(10.0, 5.0)


def test_owner_position_wins_over_target():
    _, cam = make_camera_at(Vector2(50.0, 60.0))
    target = GameObject()
    target.get_component(Transform).position = Vector2(900.0, 900.0)
    cam.target = target
    cam.on_update(0.0)
    assert cam.look_position == Vector2(50.0, 60.0)
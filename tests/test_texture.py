import pygame
import pytest

from indiegame.enums import ResourceType
from indiegame.texture import BMP_COLOR_KEY, Texture, TextureType


def save_image(path, size):
    surface = pygame.Surface(size)
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(path))


def test_new_texture_is_empty():
    texture = Texture()
    assert texture.kind is ResourceType.TEXTURE
    assert texture.texture_type is TextureType.NONE
    assert (texture.width, texture.height) == (0, 0)
    assert texture.image is None


def test_load_bmp(tmp_path):
    path = tmp_path / "sheet.bmp"
    save_image(path, (12, 7))
    texture = Texture()
    texture.load(None, str(path))
    assert texture.texture_type is TextureType.BMP
    assert (texture.width, texture.height) == (12, 7)
    assert texture.image.get_colorkey()[:3] == BMP_COLOR_KEY


def test_load_png(tmp_path):
    path = tmp_path / "sky.png"
    save_image(path, (9, 4))
    texture = Texture()
    texture.load(None, str(path))
    assert texture.texture_type is TextureType.PNG
    assert (texture.width, texture.height) == (9, 4)
    assert texture.image.get_size() == (9, 4)


def test_missing_bmp_raises(tmp_path):
    with pytest.raises(OSError):
        Texture().load(None, str(tmp_path / "nothing.bmp"))


def test_unknown_extension_loads_nothing(tmp_path):
    texture = Texture()
    texture.load(None, str(tmp_path / "notes.txt"))
    assert texture.texture_type is TextureType.NONE
    assert texture.image is None


def test_extension_is_case_sensitive(tmp_path):
    path = tmp_path / "upper.BMP"
    save_image(path, (3, 3))
    texture = Texture()
    texture.load(None, str(path))
    assert texture.texture_type is TextureType.NONE


def test_empty_path_loads_nothing():
    texture = Texture()
    texture.load(None, "")
    assert texture.texture_type is TextureType.NONE


def test_unload_releases_image(tmp_path):
    path = tmp_path / "sheet.bmp"
    save_image(path, (5, 5))
    texture = Texture()
    texture.load(None, str(path))
    texture.unload()
    assert texture.image is None
    assert (texture.width, texture.height) == (0, 0)


def test_create_back_buffer_size():
    texture = Texture()
    buffer = texture.create_back_buffer(40, 30)
    assert buffer.get_size() == (40, 30)
    assert texture.image is buffer
import pygame
import pytest

from cookiedog.gameobject import TextureInfo
from cookiedog.resources import ResourceManager


def write_image(path, width, height):
    surface = pygame.Surface((width, height))
    surface.fill((200, 100, 50))
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def image(tmp_path):
    return write_image(tmp_path / "dog.bmp", 4, 2)


def test_load_texture_reports_aspect_ratio(image):
    manager = ResourceManager()
    info = manager.load_texture(image, "dog")
    assert info.aspect_ratio == pytest.approx(4 / 2)
    assert info.id > 0


def test_loaded_surface_is_kept_by_id(image):
    manager = ResourceManager()
    info = manager.load_texture(image, "dog")
    assert manager.surfaces[info.id].get_size() == (4, 2)


def test_same_name_is_not_reloaded(image, tmp_path):
    manager = ResourceManager()
    first = manager.load_texture(image, "dog")
    other = write_image(tmp_path / "tall.bmp", 2, 8)
    second = manager.load_texture(other, "dog")
    assert second == first


def test_distinct_names_get_distinct_ids(image, tmp_path):
    manager = ResourceManager()
    other = write_image(tmp_path / "cookie.bmp", 3, 3)
    a = manager.load_texture(image, "dog")
    b = manager.load_texture(other, "cookie")
    assert a.id != b.id
    assert b.aspect_ratio == pytest.approx(1.0)


def test_get_texture_returns_loaded(image):
    manager = ResourceManager()
    info = manager.load_texture(image, "dog")
    assert manager.get_texture("dog") == info


def test_missing_file_is_reported_and_empty(tmp_path, capsys):
    manager = ResourceManager()
    missing = tmp_path / "nope.png"
    info = manager.load_texture(missing, "ghost")
    assert info == TextureInfo(0, 0.0)
    assert f"Texture failed to load at path: {missing}" in capsys.readouterr().out


def test_failed_name_stays_registered(tmp_path, image, capsys):
    manager = ResourceManager()
    manager.load_texture(tmp_path / "nope.png", "ghost")
    capsys.readouterr()
    assert manager.load_texture(image, "ghost") == TextureInfo(0, 0.0)
    assert capsys.readouterr().out == ""


def test_unknown_name_gives_empty_texture():
    manager = ResourceManager()
    assert manager.get_texture("unknown") == TextureInfo(0, 0.0)


def test_clear_forgets_everything(image):
    manager = ResourceManager()
    manager.load_texture(image, "dog")
    manager.clear()
    assert manager.surfaces == {}
    assert manager.get_texture("dog") == TextureInfo(0, 0.0)
import shutil
from pathlib import Path

import pygame
import pytest

from tombeau.errors import ErrorCode, GameError
from tombeau.font import Font, font_path


@pytest.fixture
def root(tmp_path):
    default = Path(pygame.font.__file__).parent / pygame.font.get_default_font()
    target = tmp_path / "Annexe" / "font" / "test.ttf"
    target.parent.mkdir(parents=True)
    shutil.copy(default, target)
    return tmp_path


def test_font_path_default():
    assert font_path(None) == Path("Annexe/font/Roboto/Roboto-Thin.ttf")


def test_font_path_named():
    assert font_path("Sans/Bold.ttf") == Path("Annexe/font/Sans/Bold.ttf")


def test_missing_font_raises_file_error(tmp_path):
    with pytest.raises(GameError) as info:
        Font("absent.ttf", 12, None, tmp_path)
    assert info.value.code is ErrorCode.FILE


def test_default_size_and_color(root):
    font = Font("test.ttf", 0, None, root)
    assert font.size == 18
    assert font.color == (0, 0, 0, 0)


def test_color_is_kept(root):
    font = Font("test.ttf", 20, (92, 75, 43, 255), root)
    assert font.color == (92, 75, 43, 255)
    assert font.describe() == "police{r=92;g=75;b=43;a=255}"


def test_set_color(root):
    font = Font("test.ttf", 20, None, root)
    font.set_color((255, 255, 255, 255))
    assert font.color == (255, 255, 255, 255)


def test_invalid_color_raises(root):
    font = Font("test.ttf", 20, None, root)
    with pytest.raises(GameError) as info:
        font.set_color((300, 0, 0, 0))
    assert info.value.code is ErrorCode.COLOR


def test_render_single_line(root):
    font = Font("test.ttf", 20, (255, 255, 255), root)
    surface = font.render("Bonjour")
    assert surface.get_width() > 0
    assert surface.get_height() > 0


def test_render_wraps_text(root):
    font = Font("test.ttf", 20, (255, 255, 255), root)
    single = font.render("aaaa bbbb cccc")
    limit = font._face.size("aaaa bbbb")[0]
    wrapped = font.render("aaaa bbbb cccc", limit)
    assert wrapped.get_width() <= limit
    assert wrapped.get_height() > single.get_height()


def test_render_keeps_explicit_newlines(root):
    font = Font("test.ttf", 20, (255, 255, 255), root)
    one = font.render("ligne", 1000)
    two = font.render("ligne\nligne", 1000)
    assert two.get_height() == 2 * one.get_height()


def test_render_none_raises(root):
    font = Font("test.ttf", 20, None, root)
    with pytest.raises(GameError) as info:
        font.render(None)
    assert info.value.code is ErrorCode.ARGUMENT


def test_closed_font_cannot_render(root):
    font = Font("test.ttf", 20, None, root)
    font.close()
    with pytest.raises(GameError) as info:
        font.render("texte")
    assert info.value.code is ErrorCode.ARGUMENT
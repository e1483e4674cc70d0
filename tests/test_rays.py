import pytest

from cubcaster.draw import init_map
from cubcaster.geometry import CELLSIZE, PI, RES_X, RES_Y, Player, Pos, trgb
from cubcaster.image import Image
from cubcaster.rays import TextureSet, cast_ray, drawrays, get_hray, get_vray

CENTER = 5 * CELLSIZE + CELLSIZE / 2


def _textures():
    faces = []
    for color in (0x0000FF, 0x00FF00, 0xFF0000, 0xFFFF00):
        tex = Image(32, 32)
        tex.fill(color)
        faces.append(tex)
    return TextureSet(*faces)


def test_get_hray_looking_down_hits_bottom_wall():
    hit = get_hray(PI / 2, Pos(CENTER, CENTER), init_map())
    assert hit.y == pytest.approx(7 * CELLSIZE)
    assert hit.x == pytest.approx(CENTER, abs=1e-6)


def test_get_vray_looking_right_hits_right_wall():
    hit = get_vray(0.0, Pos(CENTER, CENTER), init_map())
    assert hit.x == pytest.approx(7 * CELLSIZE)
    assert hit.y == pytest.approx(CENTER)


def test_cast_ray_height_and_texture():
    textures = _textures()
    player = Player(Pos(CENTER, CENTER), PI)
    ray = cast_ray(PI - 0.1, player, init_map(), textures)
    assert 0 < ray.hline <= RES_Y
    assert ray.tex in (textures.north, textures.south, textures.west, textures.east)
    assert 0 <= ray.tx < 32


def test_cast_ray_left_uses_west_texture():
    textures = _textures()
    player = Player(Pos(CENTER, CENTER), PI)
    ray = cast_ray(PI - 0.1, player, init_map(), textures)
    assert ray.tex is textures.west


def test_drawrays_sky_wall_floor():
    img = Image(RES_X, RES_Y)
    textures = _textures()
    player = Player(Pos(CENTER, CENTER), PI)
    floor, ceiling = trgb(0, 128, 128, 128), trgb(0, 0, 255, 255)
    drawrays(img, player, init_map(), textures, floor, ceiling)
    wall_colors = {t.get_pixel(0, 0) for t in
                   (textures.north, textures.south, textures.west, textures.east)}
    for x in (4, 480, 900):
        assert img.get_pixel(x, 5) == ceiling
        assert img.get_pixel(x, RES_Y - 5) == floor
        assert img.get_pixel(x, RES_Y // 2) in wall_colors
import math

import pytest

from cubcaster.game import Game, Key, load_textures
from cubcaster.geometry import PI, RES_X, RES_Y, Pos, trgb
from cubcaster.image import Image
from cubcaster.rays import TextureSet


def _texture(color):
    img = Image(32, 32)
    img.fill(color)
    return img


@pytest.fixture
def game():
    textures = TextureSet(
        north=_texture(0xFF0000),
        south=_texture(0x00FF00),
        west=_texture(0x0000FF),
        east=_texture(0xFFFF00),
    )
    return Game(textures)


def _xpm(color):
    return (
        "/* XPM */\n"
        "static char *tex[] = {\n"
        '"2 2 1 1",\n'
        f'"a c {color}",\n'
        '"aa",\n'
        '"aa"\n'
        "};\n"
    )


def test_initial_state(game):
    assert game.player.pos == Pos(352, 352)
    assert game.player.angle == PI
    assert game.floor_col == trgb(0, 128, 128, 128)
    assert game.ceiling_col == trgb(0, 0, 255, 255)
    assert len(game.grid) == 8


def test_walk_forward_moves_by_direction(game):
    start = game.player.pos
    step = game.player.direction
    assert game.handle_key(Key.W) is True
    assert game.player.pos.x == pytest.approx(start.x + step.x)
    assert game.player.pos.y == pytest.approx(start.y + step.y)


def test_walk_back_and_forth_returns(game):
    start = game.player.pos
    game.handle_key(Key.S)
    assert game.player.pos.x != pytest.approx(start.x)
    game.handle_key(Key.W)
    assert game.player.pos.x == pytest.approx(start.x)
    assert game.player.pos.y == pytest.approx(start.y)


def test_strafe_keeps_direction_and_distance(game):
    start = game.player.pos
    direction = game.player.direction
    assert game.handle_key(Key.D) is True
    moved = math.hypot(game.player.pos.x - start.x, game.player.pos.y - start.y)
    assert moved == pytest.approx(5)
    assert game.player.direction.x == pytest.approx(direction.x)
    assert game.player.direction.y == pytest.approx(direction.y)


def test_strafe_left_then_right_returns(game):
    start = game.player.pos
    game.handle_key(Key.A)
    game.handle_key(Key.D)
    assert game.player.pos.x == pytest.approx(start.x, abs=1e-4)
    assert game.player.pos.y == pytest.approx(start.y, abs=1e-4)


def test_turning_right_then_left_restores_angle(game):
    game.handle_key(Key.RIGHT)
    assert game.player.angle == pytest.approx(PI + 0.1)
    assert game.player.direction.x == pytest.approx(math.cos(game.player.angle) * 5)
    game.handle_key(Key.LEFT)
    assert game.player.angle == pytest.approx(PI)


def test_move_outside_map_is_refused(game):
    game.player.pos = Pos(2, 100)
    game.handle_key(Key.W)
    assert game.player.pos == Pos(2, 100)


def test_unknown_key_is_ignored(game):
    start = game.player.pos
    assert game.handle_key(0x1234) is False
    assert game.player.pos == start
    assert game.player.angle == PI


def test_escape_exits_with_zero(game, capsys):
    with pytest.raises(SystemExit) as info:
        game.handle_key(Key.ESCAPE)
    assert info.value.code == 0
    assert "65307 (ESC) key pressed" in capsys.readouterr().out


def test_render_draws_ceiling_and_floor(game):
    img = game.render()
    assert (img.width, img.height) == (RES_X, RES_Y)
    assert img is game.image
    assert img.get_pixel(RES_X // 2, 1) == game.ceiling_col & 0xFFFFFFFF
    assert img.get_pixel(RES_X // 2, RES_Y - 2) == game.floor_col & 0xFFFFFFFF


def test_load_textures(tmp_path):
    colors = {"north": "#FF0000", "south": "#00FF00", "west": "#0000FF", "east": "#FFFF00"}
    for name, color in colors.items():
        (tmp_path / f"{name}.xpm").write_text(_xpm(color))
    textures = load_textures(tmp_path)
    assert textures.north.get_pixel(0, 0) == 0xFF0000
    assert textures.south.get_pixel(1, 1) == 0x00FF00
    assert textures.west.get_pixel(0, 1) == 0x0000FF
    assert textures.east.get_pixel(1, 0) == 0xFFFF00
    assert (textures.north.width, textures.north.height) == (2, 2)


def test_load_textures_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path)
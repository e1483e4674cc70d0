from cubcaster.draw import (
    FLOOR_COLOR,
    WALL_COLOR,
    draw_straight,
    drawline,
    drawmap2d,
    init_map,
    put_pixel,
)
from cubcaster.geometry import RES_X, RES_Y, Pos
from cubcaster.image import Image


def _screen():
    return Image(RES_X, RES_Y)


def test_put_pixel_inside():
    img = _screen()
    put_pixel(img, 10.7, 20.2, 0x123456)
    assert img.get_pixel(10, 20) == 0x123456


def test_put_pixel_on_edge_is_ignored():
    img = _screen()
    put_pixel(img, 0, 5, 0x123456)
    put_pixel(img, 5, RES_Y, 0x123456)
    assert img.get_pixel(0, 5) == 0
    assert not any(img.data)


def test_drawline_horizontal_covers_span():
    img = _screen()
    drawline(img, Pos(30, 50), Pos(10, 50), 0xABCDEF)
    assert all(img.get_pixel(x, 50) == 0xABCDEF for x in range(10, 31))
    assert img.get_pixel(9, 50) == 0
    assert img.get_pixel(31, 50) == 0


def test_drawline_diagonal_endpoints():
    img = _screen()
    drawline(img, Pos(10, 10), Pos(40, 70), 0x00FF00)
    assert img.get_pixel(10, 10) == 0x00FF00
    assert img.get_pixel(40, 70) == 0x00FF00
    for y in range(10, 71):
        assert any(img.get_pixel(x, y) == 0x00FF00 for x in range(10, 41))


def test_draw_straight_excludes_start():
    img = _screen()
    draw_straight(img, Pos(5, 10), Pos(5, 20), 0x111111)
    assert img.get_pixel(5, 10) == 0
    assert all(img.get_pixel(5, y) == 0x111111 for y in range(11, 21))
    assert img.get_pixel(5, 21) == 0


def test_init_map_border_is_wall():
    grid = init_map()
    assert len(grid) == 8 and all(len(row) == 8 for row in grid)
    assert all(v == 1 for v in grid[0] + grid[-1])
    assert all(row[0] == 1 and row[-1] == 1 for row in grid)


def test_drawmap2d_colors():
    img = _screen()
    grid = init_map()
    drawmap2d(img, grid)
    assert img.get_pixel(32, 32) == WALL_COLOR
    assert img.get_pixel(96, 96) == FLOOR_COLOR
    assert img.get_pixel(64, 96) == 0
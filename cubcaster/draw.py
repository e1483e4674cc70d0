"""Pixel, line and 2D map drawing on screen images."""

from __future__ import annotations

from cubcaster.geometry import CELLSIZE, MAP_SIZE, RES_X, RES_Y, Pos
from cubcaster.image import Image

WALL_COLOR = 0x00FF0000
FLOOR_COLOR = 0x00808080


def put_pixel(img: Image, x: float, y: float, color: int) -> None:
    """Set a pixel if it lies strictly inside the screen; otherwise do nothing."""
    if 0 < x < RES_X and 0 < y < RES_Y:
        ix, iy = int(x), int(y)
        if ix < img.width and iy < img.height:
            img.put_pixel(ix, iy, color)


def _draw_hline(img: Image, start: Pos, dx: float, dy: float, color: int) -> None:
    if dx == 0:
        return
    step = -1 if dy < 0 else 1
    dy *= step
    y = int(start.y)
    p = int(2 * dy - dx)
    i = 0
    while i < dx + 1:
        put_pixel(img, start.x + i, y, color)
        if p >= 0:
            y += step
            p = int(p - 2 * dx)
        p = int(p + 2 * dy)
        i += 1


def _draw_vline(img: Image, start: Pos, dx: float, dy: float, color: int) -> None:
    if dy == 0:
        return
    step = -1 if dx < 0 else 1
    dx *= step
    x = int(start.x)
    p = int(2 * dx - dy)
    i = 0
    while i < dy + 1:
        put_pixel(img, x, start.y + i, color)
        if p >= 0:
            x += step
            p = int(p - 2 * dy)
        p = int(p + 2 * dx)
        i += 1


def drawline(img: Image, a: Pos, b: Pos, color: int) -> None:
    """Draw a line from ``a`` to ``b`` with Bresenham's algorithm."""
    if abs(int(b.x - a.x)) > abs(int(b.y - a.y)):
        if a.x > b.x:
            _draw_hline(img, b, a.x - b.x, a.y - b.y, color)
        else:
            _draw_hline(img, a, b.x - a.x, b.y - a.y, color)
    elif a.y > b.y:
        _draw_vline(img, b, a.x - b.x, a.y - b.y, color)
    else:
        _draw_vline(img, a, b.x - a.x, b.y - a.y, color)


def draw_straight(img: Image, a: Pos, b: Pos, color: int) -> None:
    """Draw the vertical run at ``a.x`` from just below ``a.y`` down to ``b.y``."""
    y = int(a.y)
    while y < b.y:
        y += 1
        put_pixel(img, a.x, y, color)


def init_map() -> list[list[int]]:
    """The built-in 8x8 map: 1 is a wall, 0 is open floor."""
    return [
        [1, 1, 1, 1, 1, 1, 1, 1],
        [1, 0, 1, 0, 0, 0, 0, 1],
        [1, 0, 1, 0, 0, 0, 0, 1],
        [1, 0, 1, 0, 0, 0, 0, 1],
        [1, 0, 1, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1, 1, 1],
    ]


def drawmap2d(img: Image, grid: list[list[int]]) -> None:
    """Draw the map from above, one filled square per cell."""
    for row in range(MAP_SIZE):
        for col in range(MAP_SIZE):
            color = WALL_COLOR if grid[row][col] == 1 else FLOOR_COLOR
            top = row * CELLSIZE + 1
            bottom = row * CELLSIZE + CELLSIZE - 1
            for i in range(col * CELLSIZE + 1, col * CELLSIZE + CELLSIZE - 1):
                drawline(img, Pos(i, top), Pos(i, bottom), color)
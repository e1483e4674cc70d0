"""Ray casting against the grid map and drawing of the textured 3D view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cubcaster.draw import draw_straight, put_pixel
from cubcaster.geometry import (
    CELLSIZE,
    DRAD,
    MAP_SIZE,
    PI,
    RES_Y,
    Player,
    Pos,
    dist,
    limit_angle,
)
from cubcaster.image import Image

_EPS = 0.0001
_TEX_SIZE = 32
_COLUMNS = 240
_COLUMN_WIDTH = 4
_HORIZON = 320


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _roundf(v: float) -> float:
    if not math.isfinite(v):
        return v
    return math.copysign(math.floor(abs(v) + 0.5), v)


def _cell_floor(v: float) -> int:
    n = int(v)
    return int(math.fmod(n, 1) + n / CELLSIZE) if n < 0 else n // CELLSIZE


def _is_wall(grid: list[list[int]], mx: float, my: float) -> bool:
    return grid[int(my)][int(mx)] == 1


def _in_map(mx: float, my: float) -> bool:
    return 0 < mx < MAP_SIZE and 0 < my < MAP_SIZE


def get_hray(ra: float, pos: Pos, grid: list[list[int]]) -> Pos:
    """Nearest wall hit by ray ``ra`` on a horizontal grid line."""
    r = Pos(pos.x, pos.y)
    off = Pos()
    inv_tan = _div(-1.0, math.tan(ra))
    if ra > PI:
        r.y = _cell_floor(pos.y) * CELLSIZE - _EPS
        r.x = (pos.y - r.y) * inv_tan + pos.x
        off = Pos(CELLSIZE * inv_tan, -CELLSIZE)
    if ra < PI:
        r.y = _cell_floor(pos.y) * CELLSIZE + CELLSIZE
        r.x = (pos.y - r.y) * inv_tan + pos.x
        off = Pos(-CELLSIZE * inv_tan, CELLSIZE)
    if ra == 0 or PI - _EPS < ra < PI + _EPS:
        r = Pos(pos.x, pos.y)
    for _ in range(MAP_SIZE):
        mx, my = r.x / CELLSIZE, r.y / CELLSIZE
        if _in_map(mx, my) and _is_wall(grid, mx, my):
            return r
        r = Pos(r.x + off.x, r.y + off.y)
    return r


def get_vray(ra: float, pos: Pos, grid: list[list[int]]) -> Pos:
    """Nearest wall hit by ray ``ra`` on a vertical grid line."""
    r = Pos(pos.x, pos.y)
    off = Pos()
    neg_tan = -math.tan(ra)
    if PI / 2 < ra < 3 * PI / 2:
        r.x = _cell_floor(pos.x) * CELLSIZE - _EPS
        r.y = (pos.x - r.x) * neg_tan + pos.y
        off = Pos(-CELLSIZE, CELLSIZE * neg_tan)
    if ra < PI / 2 or ra > 3 * PI / 2:
        r.x = _cell_floor(pos.x) * CELLSIZE + CELLSIZE
        r.y = (pos.x - r.x) * neg_tan + pos.y
        off = Pos(CELLSIZE, -CELLSIZE * neg_tan)
    if ra == 0 or PI - _EPS < ra < PI + _EPS:
        r = Pos(pos.x - math.fmod(int(_roundf(pos.x)), CELLSIZE), pos.y)
    for _ in range(MAP_SIZE):
        mx, my = r.x / CELLSIZE, r.y / CELLSIZE
        if _in_map(mx, my):
            if math.fmod(int(r.x), CELLSIZE) == 0 and off.x < 0:
                mx -= 1
            if _is_wall(grid, mx, my):
                return r
        r = Pos(r.x + off.x, r.y + off.y)
    return r


@dataclass
class TextureSet:
    """Wall textures for the four faces."""

    north: Image
    south: Image
    west: Image
    east: Image


@dataclass
class Ray:
    """One cast ray: its hits, wall height on screen and texture sampling."""

    hline: float = 0.0
    minhdist: Pos = field(default_factory=Pos)
    minvdist: Pos = field(default_factory=Pos)
    mindist: Pos = field(default_factory=Pos)
    tex: Image | None = None
    tx: float = 0.0
    ty_off: float = 0.0
    ty_step: float = 0.0


def _tex_column(coord: float) -> int:
    return int(math.fmod(int(int(coord) / 2), _TEX_SIZE))


def cast_ray(ra: float, player: Player, grid: list[list[int]], textures: TextureSet) -> Ray:
    """Cast one ray and work out its wall slice and texture."""
    pos = player.pos
    ray = Ray()
    ray.minhdist = get_hray(ra, pos, grid)
    ray.minvdist = get_vray(ra, pos, grid)
    ray.mindist = Pos(ray.minvdist.x, ray.minvdist.y)
    if dist(pos, ray.minhdist) < dist(pos, ray.minvdist):
        ray.mindist = Pos(ray.minhdist.x, ray.minhdist.y)
    distance = dist(ray.mindist, pos) * math.cos(limit_angle(player.angle - ra))
    ray.hline = _roundf(_div(CELLSIZE * RES_Y, distance))
    ray.ty_step = _div(_TEX_SIZE, ray.hline)
    ray.ty_off = 0.0
    if ray.hline >= RES_Y:
        ray.ty_off = (ray.hline - RES_Y) / 2
        ray.hline = RES_Y

    ray.tex = textures.east
    ray.tx = _tex_column(ray.mindist.y)
    if PI / 2 <= ra <= 3 * PI / 2:
        ray.tex = textures.west
        ray.tx = _TEX_SIZE - 1 - _tex_column(ray.mindist.y)
    if dist(ray.mindist, pos) == dist(ray.minhdist, pos):
        ray.tex = textures.north
        ray.tx = _tex_column(ray.mindist.x)
        if 0 <= ra <= PI:
            ray.tex = textures.south
            ray.tx = _TEX_SIZE - 1 - _tex_column(ray.mindist.x)
    return ray


def _draw_textured(img: Image, x: float, top: float, ray: Ray) -> None:
    tex = ray.tex
    ty = ray.ty_off * ray.ty_step
    y = int(top)
    col = min(max(int(ray.tx), 0), tex.width - 1)
    while y < top + ray.hline:
        y += 1
        row = int(ty) if math.isfinite(ty) else 0
        row = min(max(row, 0), tex.height - 1)
        put_pixel(img, x, y, tex.get_pixel(col, row))
        ty += ray.ty_step


def _draw_column(img: Image, index: int, ray: Ray, floor_col: int, ceiling_col: int) -> None:
    lineoff = _HORIZON - (int(ray.hline) >> 1)
    for j in range(_COLUMN_WIDTH):
        x = index * _COLUMN_WIDTH + j
        draw_straight(img, Pos(x, 0), Pos(x, lineoff), ceiling_col)
        _draw_textured(img, x, lineoff, ray)
        draw_straight(img, Pos(x, ray.hline + lineoff), Pos(x, RES_Y), floor_col)


def drawrays(
    img: Image,
    player: Player,
    grid: list[list[int]],
    textures: TextureSet,
    floor_col: int,
    ceiling_col: int,
) -> None:
    """Render the 60-degree view of the player into ``img``."""
    ra = limit_angle(player.angle - DRAD * 30)
    for index in range(_COLUMNS):
        ray = cast_ray(ra, player, grid, textures)
        _draw_column(img, index, ray, floor_col, ceiling_col)
        ra = limit_angle(ra + DRAD / 4)
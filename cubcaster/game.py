"""Game state of the raycaster: player, map, textures and keyboard handling."""

from __future__ import annotations

import math
import os
from enum import IntEnum

from cubcaster.draw import init_map
from cubcaster.geometry import (
    CELLSIZE,
    PI,
    RES_X,
    RES_Y,
    STEP,
    Player,
    Pos,
    is_pos_in_res,
    limit_angle,
    trgb,
)
from cubcaster.image import Image
from cubcaster.rays import TextureSet, drawrays
from cubcaster.xpm import read_xpm_file

_TURN = 0.1
_START_CELL = 5


class Key(IntEnum):
    """Keys the game reacts to, as X11 keysyms."""

    ESCAPE = 0xFF1B
    W = 0x77
    A = 0x61
    S = 0x73
    D = 0x64
    LEFT = 0xFF51
    RIGHT = 0xFF53


class Game:
    """The player on the built-in map, with the colours and textures of the view."""

    def __init__(self, textures: TextureSet) -> None:
        start = _START_CELL * CELLSIZE + CELLSIZE / 2
        self.textures = textures
        self.player = Player(Pos(start, start), PI)
        self.grid = init_map()
        self.floor_col = trgb(0, 128, 128, 128)
        self.ceiling_col = trgb(0, 0, 255, 255)
        self.image = Image(RES_X, RES_Y)

    def render(self) -> Image:
        """Draw the current view into a fresh screen image and return it."""
        self.image = Image(RES_X, RES_Y)
        drawrays(
            self.image,
            self.player,
            self.grid,
            self.textures,
            self.floor_col,
            self.ceiling_col,
        )
        return self.image

    def _move_to(self, x: float, y: float) -> None:
        if is_pos_in_res(x, y):
            self.player.pos = Pos(x, y)

    def _walk(self, key: Key) -> None:
        pos = self.player.pos
        step = self.player.direction
        sign = -1 if key is Key.S else 1
        self._move_to(pos.x + sign * step.x, pos.y + sign * step.y)

    def _strafe(self, key: Key) -> None:
        pos = self.player.pos
        heading = limit_angle(self.player.angle + PI / 2)
        if key is Key.A:
            heading = limit_angle(heading - PI)
        self._move_to(
            pos.x + math.cos(heading) * STEP, pos.y + math.sin(heading) * STEP
        )
        self.player.update_direction()

    def _turn(self, key: Key) -> None:
        self.player.angle = limit_angle(self.player.angle + _TURN)
        if key is Key.LEFT:
            self.player.angle = limit_angle(self.player.angle - 2 * _TURN)
        self.player.update_direction()

    def handle_key(self, key: int) -> bool:
        """Apply a key press.

        Returns True when the view must be redrawn, False for keys that are
        ignored. Escape raises SystemExit with status 0.
        """
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESCAPE:
            print(f"{int(key)} (ESC) key pressed")
            raise SystemExit(0)
        if key in (Key.W, Key.S):
            self._walk(key)
        elif key in (Key.A, Key.D):
            self._strafe(key)
        else:
            self._turn(key)
        return True


def load_textures(directory: str | os.PathLike[str]) -> TextureSet:
    """Read north.xpm, south.xpm, west.xpm and east.xpm from ``directory``."""
    return TextureSet(
        north=read_xpm_file(os.path.join(directory, "north.xpm")),
        south=read_xpm_file(os.path.join(directory, "south.xpm")),
        west=read_xpm_file(os.path.join(directory, "west.xpm")),
        east=read_xpm_file(os.path.join(directory, "east.xpm")),
    )
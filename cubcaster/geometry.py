"""Positions, the player, and the small numeric helpers of the raycaster."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

PI = 3.14159265358979323846
DRAD = 0.0174533

RES_X = 960
RES_Y = 640
CELLSIZE = 64

# Cells per side of the square map.
MAP_SIZE = 8

# Length of the player's step vector.
STEP = 5


@dataclass
class Pos:
    """A point in world or screen coordinates."""

    x: float = 0.0
    y: float = 0.0


class Player:
    """The viewer: a position, a heading in radians and a step vector."""

    def __init__(self, pos: Pos, angle: float) -> None:
        self.pos = pos
        self.angle = angle
        self.direction = Pos()
        self.update_direction()

    def update_direction(self) -> None:
        """Recompute the step vector from the current heading."""
        self.direction = Pos(math.cos(self.angle) * STEP, math.sin(self.angle) * STEP)

    def __repr__(self) -> str:
        return f"Player(pos={self.pos!r}, angle={self.angle!r})"


def dist(a: Pos, b: Pos) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def limit_angle(nb: float) -> float:
    """Bring an angle that is at most one turn out of range back into [0, 2*pi]."""
    if nb > 2 * PI:
        return nb - 2 * PI
    if nb < 0:
        return nb + 2 * PI
    return nb


def trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into a signed 32-bit pixel value."""
    value = ((t << 24) | (r << 16) | (g << 8) | b) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _c_mod(a: int, b: int) -> int:
    return int(math.fmod(a, b))


def hex_to_dec(nb: str) -> int:
    """Read a string of hexadecimal digits, either case, without prefix."""
    result = 0
    for power, char in enumerate(reversed(nb)):
        code = ord(char) - ord("0")
        digit = code if char.isdigit() and char.isascii() else 9 + _c_mod(code, 16)
        result += digit * 16 ** power
    return result


def is_pos_in_res(x: float, y: float) -> bool:
    """Whether a world position lies inside the map."""
    return 0 <= x / CELLSIZE < MAP_SIZE and 0 <= y / CELLSIZE < MAP_SIZE
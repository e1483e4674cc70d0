"""Window, event loop and command-line entry point of the raycaster."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cubcaster.game import Game, Key, load_textures  # noqa: E402
from cubcaster.geometry import RES_X, RES_Y  # noqa: E402
from cubcaster.image import Image  # noqa: E402

TITLE = "CUB3D"

# Status when the window is closed, as opposed to leaving with Escape.
_CLOSE_STATUS = 1

_REPEAT_DELAY_MS = 200
_REPEAT_INTERVAL_MS = 30

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def key_from_pygame(key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _PYGAME_KEYS.get(key)


def image_to_surface(img: Image) -> pygame.Surface:
    """Copy an image into an opaque pygame surface of the same size."""
    data = bytes(img.data)
    rgbx = bytearray(data)
    rgbx[0::4] = data[2::4]
    rgbx[2::4] = data[0::4]
    surface = pygame.image.frombuffer(bytes(rgbx), (img.width, img.height), "RGBX")
    return surface.copy()


def _show(screen: pygame.Surface, img: Image) -> None:
    screen.blit(image_to_surface(img), (0, 0))
    pygame.display.flip()


def run(game: Game) -> int:
    """Open the window and run the game until it ends; return the exit status."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((RES_X, RES_Y))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(_REPEAT_DELAY_MS, _REPEAT_INTERVAL_MS)
        _show(screen, game.render())
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return _CLOSE_STATUS
            if event.type != pygame.KEYDOWN:
                continue
            key = key_from_pygame(event.key)
            if key is None:
                continue
            try:
                redraw = game.handle_key(key)
            except SystemExit as stop:
                return stop.code if isinstance(stop.code, int) else 0
            if redraw:
                _show(screen, game.render())
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game with textures from a directory (default: ./textures)."""
    parser = argparse.ArgumentParser(prog="cubcaster", description="Textured raycaster.")
    parser.add_argument(
        "textures",
        nargs="?",
        default="textures",
        help="directory holding north.xpm, south.xpm, west.xpm and east.xpm",
    )
    args = parser.parse_args(argv)
    game = Game(load_textures(args.textures))
    return run(game)
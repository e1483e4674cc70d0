# cubcaster

A small first-person maze explorer drawn with textured ray casting.
The world is a fixed 8×8 grid of walls. Every frame, 240 rays sweep a
60° field of view. Each ray is drawn as a 4-pixel-wide column. Each
wall slice is shaded from one of four XPM textures, one for each
compass side, sampled as 32×32 tiles. The floor is a flat grey and the
ceiling a flat cyan.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Playing

```
cubcaster [TEXTURES_DIR]
```

This opens a 960×640 window with pygame. The textures are read from
`TEXTURES_DIR`, which defaults to `textures` in the current directory.
It must hold `north.xpm`, `south.xpm`, `east.xpm` and `west.xpm`. The
player starts in the middle of cell (5, 5) and faces west.

| Key            | Action                   |
|----------------|--------------------------|
| `W` / `S`      | move forward / backward  |
| `A` / `D`      | strafe left / right      |
| `←` / `→`      | turn left / right        |
| `Esc`          | quit (exit status 0)     |

Closing the window also quits, with exit status 1. Held keys repeat.

## Using it as a library

The pieces are usable on their own:

- `cubcaster.xpm`
  - `read_xpm_file(path)` reads an XPM file written as C source.
  - `xpm_from_data(lines)` builds an image from XPM strings already in
    memory.
  - `parse_xpm(lines)` does the parsing for both.
  - `strip_comments`, `split_words`, `str_str` and `str_str_quoted` are
    the text helpers used by the reader.
  - `XpmError` (a `ValueError`) reports malformed input.
  - Pixels whose colour is `None` get the value `TRANSPARENT`
    (`0xFF000000`).
- `cubcaster.colors`
  - `lookup_color(name)` resolves an X11 colour name, ignoring case. It
    raises `KeyError` for unknown names.
  - `parse_color(name, end)` also accepts `#rrggbb` and joins a
    two-word name. It returns 0 for unknown names.
- `cubcaster.image`
  - `Image(width, height)` is a 32-bit little-endian pixel buffer with
    `put_pixel`, `get_pixel` and `fill`.
  - `good_color(color, depth, decrgb)` converts a colour for visuals
    shallower than 24 bits.
- `cubcaster.geometry`
  - `Pos` and `Player`.
  - `dist`, `limit_angle`, `trgb`, `hex_to_dec` and `is_pos_in_res`.
  - The constants `RES_X`, `RES_Y`, `CELLSIZE` and `MAP_SIZE`.
- `cubcaster.draw`
  - `put_pixel`, `drawline` (Bresenham) and `draw_straight`.
  - `init_map()` returns the built-in map.
  - `drawmap2d(img, grid)` draws a top-down view of the map.
- `cubcaster.rays`
  - `get_hray` and `get_vray` find the wall hits.
  - `cast_ray` returns a `Ray`.
  - `drawrays` renders the 3D view with a `TextureSet`.
- `cubcaster.game`
  - `Game` holds the player and the map. It renders frames with
    `render()` and reacts to `Key` presses through `handle_key()`.
  - `load_textures(directory)` reads the four textures.
- `cubcaster.app`
  - `run(game)` runs the pygame window.
  - `main(argv)` is the command.
  - `key_from_pygame` and `image_to_surface` convert between pygame and
    the package.

```python
from cubcaster.game import Game, Key, load_textures

game = Game(load_textures("textures"))
game.handle_key(Key.W)         # step forward
frame = game.render()          # an Image of 960×640 pixels
print(hex(frame.get_pixel(480, 10)))
```

## Limits

- The map is the built-in 8×8 grid. There is no loader for map or scene
  files.
- The floor colour, the ceiling colour and the start position are fixed
  in `Game`.
- `drawmap2d` exists, but the game does not show a minimap.
- There are no sprites, doors or mouse controls.
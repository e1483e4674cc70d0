"""Reading of XPM images, from files or from in-memory string arrays."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence

from cubcaster.colors import parse_color
from cubcaster.image import Image

# Pixel value used where the XPM colour is "None".
TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def str_str(text: str, find: str, length: int) -> int:
    """Position of ``find`` in ``text``, or -1; -1 too if ``find`` is longer than ``length``."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return -1
    return text.find(find)


def str_str_quoted(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but ignore matches inside double quotes."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside quoted strings.

    Comments are replaced by spaces, so the length of the text is kept.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := str_str_quoted(text, opener, len(text))) != -1:
            rest = text[begin + len(opener):]
            end = str_str(rest, closer, len(rest))
            span = min(len(opener) + end + len(closer), len(text) - begin)
            text = text[:begin] + " " * span + text[begin + span:]
    return text


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _color_spec(words: list[str]) -> int:
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if index >= len(words):
        raise XpmError("colour definition has no value after 'c'")
    end = words[index + 1] if index + 1 < len(words) else None
    return parse_color(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source, "the header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])!r}")

    # Small keys keep the last definition, larger ones the first.
    last_wins = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "the colour table is complete")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        key = line[:cpp]
        value = _color_spec(split_words(line[cpp:]))
        if last_wins:
            table[key] = value
        else:
            table.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "all pixel rows are read")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} shorter than {width} pixels")
        keys = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        for x, key in enumerate(keys):
            color = table.get(key, 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_from_data(lines: Sequence[str]) -> Image:
    """Build an image from XPM strings already held in memory."""
    if isinstance(lines, str):
        raise TypeError("expected a sequence of XPM strings, not a single string")
    return parse_xpm(list(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def read_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file written as C source and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)))
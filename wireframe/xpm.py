"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from wireframe.colors import lookup_color
from wireframe.image import LSB_FIRST, Image
from wireframe.text import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces.

    The result has the same length as ``text``.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of every double-quoted string in ``text``."""
    strings = []
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            break
        strings.append(text[start + 1:end])
        pos = end + 1
    return strings


def parse_xpm(lines: Iterable[str], byte_order: int = LSB_FIRST) -> Image:
    """Build an image from the strings of an XPM pixmap."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in XPM line {line!r}") from None
        if at >= len(words):
            raise XpmError(f"missing colour after key in XPM line {line!r}")
        suffix = words[at + 1] if at + 1 < len(words) else None
        color = lookup_color(words[at], suffix)
        key = line[:cpp]
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height, byte_order=byte_order)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings already held in memory."""
    return parse_xpm(lines)


def xpm_from_file(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))
"""Reading height maps: rows of whitespace-separated ``z[,0xCOLOR]`` tokens."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable

from .color import convert_color

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


@dataclass
class HeightMap:
    """A grid of points stored in reading order.

    ``x`` holds each point's row index and ``y`` its column index.
    ``width`` is the number of tokens on the last row read.
    """

    width: int = 0
    height: int = 0
    x: list[int] = field(default_factory=list)
    y: list[int] = field(default_factory=list)
    z: list[int] = field(default_factory=list)
    color: list[int] = field(default_factory=list)
    size: int = 0

    def __len__(self) -> int:
        return self.size


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, wrapping to 32 bits."""
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return ((value + 2**31) % 2**32) - 2**31


def split_words(text: str, separator: str) -> list[str]:
    """Split on a single character, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def parse_lines(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of text."""
    heightmap = HeightMap()
    width = 0
    for row, line in enumerate(lines):
        tokens = split_words(line.rstrip("\n"), " ")
        for col, token in enumerate(tokens):
            values = split_words(token, ",")
            heightmap.x.append(row)
            heightmap.y.append(col)
            heightmap.z.append(atoi(values[0]) if values else 0)
            heightmap.color.append(convert_color(values[1] if len(values) > 1 else None))
        width = len(tokens)
        heightmap.height += 1
    if not heightmap.z:
        raise ValueError("height map holds no points")
    heightmap.width = width
    heightmap.size = min(heightmap.height * width, len(heightmap.z))
    return heightmap


def parse_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read a height map file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_lines(handle)
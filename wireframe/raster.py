"""A pixel canvas, line drawing and wireframe rendering."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field
from enum import Enum

from .color import BACKGROUND, interpolate_colors
from .heightmap import HeightMap
from .projection import Projection, project
from .transform import Lookup, Transformation


class _Orientation(Enum):
    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(frozen=True)
class Point:
    """A screen position with a packed RGBA colour."""

    x: int
    y: int
    color: int


@dataclass
class Canvas:
    """A width × height grid of packed RGBA pixels, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas size must not be negative")
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match canvas size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._index(x, y)]

    def fill(self, color: int) -> None:
        self.pixels = [color & 0xFFFFFFFF] * (self.width * self.height)

    def resize(self, width: int, height: int) -> None:
        """Change the size; the contents are cleared."""
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def to_rgba_bytes(self) -> bytes:
        """The pixels as R, G, B, A bytes, row by row."""
        data = array("I", self.pixels)
        if sys.byteorder == "little":
            data.byteswap()
        return data.tobytes()


def draw_line(canvas: Canvas, start: Point, end: Point) -> None:
    """Draw from ``start`` towards ``end`` with a colour gradient.

    The last pixel of the line is not drawn; pixels off the canvas are skipped.
    """
    if abs(start.x - end.x) > abs(start.y - end.y):
        orientation = _Orientation.HORIZONTAL
    else:
        orientation = _Orientation.VERTICAL
    vertical = orientation is _Orientation.VERTICAL
    if (not vertical and start.x > end.x) or (vertical and start.y > end.y):
        start, end = end, start

    if vertical:
        major, minor, track = end.y - start.y, end.x - start.x, start.x
    else:
        major, minor, track = end.x - start.x, end.y - start.y, start.y
    if major == 0:
        return
    step = -1 if minor < 0 else 1
    minor *= step
    decision = 2 * minor - major

    for i in range(major):
        color = interpolate_colors(start.color, end.color, major, i)
        x, y = (track, start.y + i) if vertical else (start.x + i, track)
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.put_pixel(x, y, color)
        if decision >= 0:
            track += step
            decision -= 2 * major
        decision += 2 * minor


def render(
    canvas: Canvas,
    heightmap: HeightMap,
    transformation: Transformation,
    lookup: Lookup,
) -> Projection:
    """Clear the canvas and draw the map's wireframe; returns the projection used."""
    canvas.fill(BACKGROUND)
    projection = project(heightmap, transformation, lookup)
    projection.compute_offset(canvas.width, canvas.height, transformation)
    size = heightmap.size
    width = heightmap.width

    def point(idx: int) -> Point:
        return Point(
            projection.x[idx] + projection.offset_x,
            projection.y[idx] + projection.offset_y,
            heightmap.color[idx],
        )

    for idx in range(size):
        start = point(idx)
        if idx + 1 < size and width and (idx + 1) % width:
            draw_line(canvas, start, point(idx + 1))
        if width and idx + width < size:
            draw_line(canvas, start, point(idx + width))
    return projection
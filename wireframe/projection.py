"""Projecting a height map onto the screen plane."""

from __future__ import annotations

from dataclasses import dataclass, field

from .heightmap import HeightMap
from .transform import SCALE, Lookup, Transformation

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _wrap32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


@dataclass
class Projection:
    """Projected point coordinates, their bounds and the centring offset."""

    x: list[int] = field(default_factory=list)
    y: list[int] = field(default_factory=list)
    z: list[int] = field(default_factory=list)
    offset_x: int = 0
    offset_y: int = 0
    max_x: int = _INT32_MIN
    min_x: int = _INT32_MAX
    max_y: int = _INT32_MIN
    min_y: int = _INT32_MAX

    def update_bounds(self, x: int, y: int) -> None:
        """Widen the bounding box to include the point (x, y)."""
        self.max_x = max(self.max_x, x)
        self.min_x = min(self.min_x, x)
        self.max_y = max(self.max_y, y)
        self.min_y = min(self.min_y, y)

    def compute_offset(
        self, image_width: int, image_height: int, transformation: Transformation
    ) -> None:
        """Centre the mesh in the image, then apply the user's translation."""
        mesh_width = self.max_x - self.min_x
        mesh_height = self.max_y - self.min_y
        self.offset_x = _div(image_width - mesh_width, 2) - self.min_x + transformation.ofst_x
        self.offset_y = _div(image_height - mesh_height, 2) - self.min_y + transformation.ofst_y


def _rotate_x(y: int, z: int, sin: int, cos: int) -> tuple[int, int]:
    return (
        _wrap32(_div(cos * y - sin * z, SCALE)),
        _wrap32(_div(sin * y + cos * z, SCALE)),
    )


def _rotate_y(x: int, y: int, z: int, sin: int, cos: int) -> tuple[int, int]:
    return (
        _wrap32(_div(cos * x + sin * z, SCALE)),
        _wrap32(_div(cos * z - sin * y, SCALE)),
    )


def _rotate_z(x: int, y: int, sin: int, cos: int) -> tuple[int, int]:
    return (
        _wrap32(_div(cos * x - sin * y, SCALE)),
        _wrap32(_div(sin * x + cos * y, SCALE)),
    )


def project(
    heightmap: HeightMap, transformation: Transformation, lookup: Lookup
) -> Projection:
    """Scale and rotate every point of the map; offsets are left at zero."""
    t = transformation
    sin_x, cos_x = lookup.sin[t.rot_x], lookup.cos[t.rot_x]
    sin_y, cos_y = lookup.sin[t.rot_y], lookup.cos[t.rot_y]
    sin_z, cos_z = lookup.sin[t.rot_z], lookup.cos[t.rot_z]
    projection = Projection()
    points = zip(heightmap.x, heightmap.y, heightmap.z)
    for _, (hx, hy, hz) in zip(range(heightmap.size), points):
        x = _wrap32(hx * t.scl_x)
        y = _wrap32(hy * t.scl_y)
        z = _wrap32(hz * t.scl_z)
        y, z = _rotate_x(y, z, sin_x, cos_x)
        x, z = _rotate_y(x, y, z, sin_y, cos_y)
        x, y = _rotate_z(x, y, sin_z, cos_z)
        projection.x.append(x)
        projection.y.append(y)
        projection.z.append(z)
        projection.update_bounds(x, y)
    return projection
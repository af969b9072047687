"""View state: rotation, scaling and translation, plus fixed-point trig tables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

TILE_SIZE = 5
SCALE = 1000
WIDTH = 1280
HEIGHT = 960

_ROTATION_STEP = 5
_ZOOM_IN = 1100
_ZOOM_OUT = 900
_DEFAULT_ROTATION = (54, 0, 35)


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Direction(Enum):
    X_POS = 0
    X_NEG = 1
    Y_POS = 2
    Y_NEG = 3
    Z_POS = 4
    Z_NEG = 5


@dataclass(frozen=True)
class Lookup:
    """Sine and cosine per whole degree, scaled by ``SCALE``."""

    sin: tuple[int, ...]
    cos: tuple[int, ...]

    @classmethod
    def build(cls) -> "Lookup":
        radians = [deg * math.pi / 180 for deg in range(360)]
        return cls(
            sin=tuple(int(math.sin(r) * SCALE + 0.5) for r in radians),
            cos=tuple(int(math.cos(r) * SCALE + 0.5) for r in radians),
        )


@dataclass
class Transformation:
    """Current view parameters; angles are degrees in 0..359."""

    rot_x: int = _DEFAULT_ROTATION[0]
    rot_y: int = _DEFAULT_ROTATION[1]
    rot_z: int = _DEFAULT_ROTATION[2]
    base_scl: int = SCALE
    base_scl_x: int = TILE_SIZE
    base_scl_y: int = TILE_SIZE
    base_scl_z: int = TILE_SIZE
    scl_x: int = TILE_SIZE
    scl_y: int = TILE_SIZE
    scl_z: int = TILE_SIZE
    ofst_x: int = 0
    ofst_y: int = 0

    def recompute_scaling(self) -> None:
        """Derive per-axis scales from the base scales and the zoom, at least 1."""
        self.scl_x = max(1, _div(self.base_scl_x * self.base_scl, SCALE))
        self.scl_y = max(1, _div(self.base_scl_y * self.base_scl, SCALE))
        self.scl_z = max(1, _div(self.base_scl_z * self.base_scl, SCALE))

    def translate(self, direction: Direction) -> None:
        if direction is Direction.X_POS:
            self.ofst_x += TILE_SIZE
        elif direction is Direction.X_NEG:
            self.ofst_x -= TILE_SIZE
        elif direction is Direction.Y_POS:
            self.ofst_y += TILE_SIZE
        elif direction is Direction.Y_NEG:
            self.ofst_y -= TILE_SIZE

    def rotate(self, direction: Direction) -> None:
        step = _ROTATION_STEP
        if direction is Direction.X_POS:
            self.rot_x = (self.rot_x + step) % 360
        elif direction is Direction.X_NEG:
            self.rot_x = (self.rot_x - step) % 360
        elif direction is Direction.Y_POS:
            self.rot_y = (self.rot_y + step) % 360
        elif direction is Direction.Y_NEG:
            self.rot_y = (self.rot_y - step) % 360
        elif direction is Direction.Z_POS:
            self.rot_z = (self.rot_z + step) % 360
        elif direction is Direction.Z_NEG:
            self.rot_z = (self.rot_z - step) % 360

    def scale(self, direction: Direction) -> None:
        """Stretch or flatten heights; the z base scale never drops below 1."""
        if direction is Direction.Z_POS:
            self.base_scl_z += 1
        elif direction is Direction.Z_NEG and self.base_scl_z > 1:
            self.base_scl_z -= 1
        self.recompute_scaling()

    def zoom(self, ydelta: float) -> None:
        """Zoom in for positive scroll, out for negative, by a tenth each step."""
        if ydelta > 0:
            self.base_scl = _div(self.base_scl * _ZOOM_IN, SCALE)
        elif ydelta < 0:
            self.base_scl = _div(self.base_scl * _ZOOM_OUT, SCALE)
        self.recompute_scaling()

    def reset(self) -> None:
        """Return to the initial view."""
        self.ofst_x = 0
        self.ofst_y = 0
        self.base_scl = SCALE
        self.base_scl_x = TILE_SIZE
        self.base_scl_y = TILE_SIZE
        self.base_scl_z = TILE_SIZE
        self.recompute_scaling()
        self.rot_x, self.rot_y, self.rot_z = _DEFAULT_ROTATION
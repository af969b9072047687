"""The interactive viewer: engine state, input handling and the window loop."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .color import BACKGROUND
from .heightmap import HeightMap, parse_map
from .projection import Projection
from .raster import Canvas, render
from .transform import HEIGHT, WIDTH, Direction, Lookup, Transformation


class Key(Enum):
    ESCAPE = "escape"
    SPACE = "space"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    Q = "q"
    A = "a"
    W = "w"
    S = "s"
    E = "e"
    D = "d"
    R = "r"
    F = "f"


_TRANSLATION_KEYS = (
    (Key.RIGHT, Direction.X_POS),
    (Key.LEFT, Direction.X_NEG),
    (Key.UP, Direction.Y_NEG),
    (Key.DOWN, Direction.Y_POS),
)
_ROTATION_KEYS = (
    (Key.Q, Direction.X_POS),
    (Key.A, Direction.X_NEG),
    (Key.W, Direction.Y_POS),
    (Key.S, Direction.Y_NEG),
    (Key.E, Direction.Z_POS),
    (Key.D, Direction.Z_NEG),
)
_SCALING_KEYS = (
    (Key.R, Direction.Z_POS),
    (Key.F, Direction.Z_NEG),
)


def _first_match(keys: set[Key], table) -> Direction | None:
    return next((direction for key, direction in table if key in keys), None)


@dataclass
class Engine:
    """Everything the viewer needs: the map, the view and the canvas."""

    heightmap: HeightMap
    canvas: Canvas
    transformation: Transformation = field(default_factory=Transformation)
    lookup: Lookup = field(default_factory=Lookup.build)
    running: bool = True
    projection: Projection | None = None

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], width: int = WIDTH, height: int = HEIGHT
    ) -> "Engine":
        """Load a map file and set up a canvas of the given size."""
        return cls(heightmap=parse_map(path), canvas=Canvas(width, height))

    def redraw(self) -> None:
        self.projection = render(self.canvas, self.heightmap, self.transformation, self.lookup)

    def handle_keys(self, keys: Iterable[Key]) -> bool:
        """Apply the held keys; returns True if the picture was redrawn.

        Escape stops the engine. Space resets the view and overrides the
        other keys; otherwise at most one translation, one rotation and one
        scaling are applied, each followed by a redraw.
        """
        held = set(keys)
        redrawn = False
        if Key.ESCAPE in held:
            self.running = False
        if Key.SPACE in held:
            self.transformation.reset()
            self.redraw()
            return True
        direction = _first_match(held, _TRANSLATION_KEYS)
        if direction is not None:
            self.transformation.translate(direction)
            self.redraw()
            redrawn = True
        direction = _first_match(held, _ROTATION_KEYS)
        if direction is not None:
            self.transformation.rotate(direction)
            self.redraw()
            redrawn = True
        direction = _first_match(held, _SCALING_KEYS)
        if direction is not None:
            self.transformation.scale(direction)
            self.redraw()
            redrawn = True
        return redrawn

    def handle_scroll(self, ydelta: float) -> None:
        self.transformation.zoom(ydelta)
        self.redraw()

    def resize(self, width: int, height: int) -> None:
        self.canvas.resize(width, height)
        self.canvas.fill(BACKGROUND)
        self.redraw()


def _run(engine: Engine) -> None:
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_q: Key.Q,
        pygame.K_a: Key.A,
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_e: Key.E,
        pygame.K_d: Key.D,
        pygame.K_r: Key.R,
        pygame.K_f: Key.F,
    }
    pygame.init()
    try:
        size = (engine.canvas.width, engine.canvas.height)
        screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("FdF")
        clock = pygame.time.Clock()
        engine.redraw()
        while engine.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    engine.running = False
                elif event.type == pygame.VIDEORESIZE:
                    engine.resize(event.w, event.h)
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                elif event.type == pygame.MOUSEWHEEL:
                    engine.handle_scroll(event.y)
            pressed = pygame.key.get_pressed()
            engine.handle_keys(key for code, key in key_map.items() if pressed[code])
            image = pygame.image.frombuffer(
                engine.canvas.to_rgba_bytes(),
                (engine.canvas.width, engine.canvas.height),
                "RGBA",
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the map file named on the command line in a viewer window."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: wireframe <map-file>", file=sys.stderr)
        return 1
    try:
        engine = Engine.from_file(args[0])
    except (OSError, ValueError) as exc:
        print(f"wireframe: {exc}", file=sys.stderr)
        return 1
    _run(engine)
    return 0
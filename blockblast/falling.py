"""Decorative shapes that drift down behind the screens."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .shapes import COLORS

CELL_SIZE = 20
TICK_MS = 16
SHAPE_COUNT = 10

FALLING_TEMPLATES: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 0),),
    ((0, 0), (0, 1)),
    ((0, 0), (0, 1), (0, 2)),
    ((0, 0), (0, 1), (1, 0), (1, 1)),
    ((0, 0), (0, 1), (0, 2), (1, 1)),
)


@dataclass
class FallingShape:
    """A falling piece; cells are (x, y) offsets in cell units."""

    cells: tuple[tuple[int, int], ...]
    x: float
    y: float
    speed: float
    rotation: float
    color: str


class FallingShapes:
    """A field of shapes that fall, spin and respawn above the top edge."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        count: int = SHAPE_COUNT,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.shapes = [self._spawn() for _ in range(count)]

    def _random_x(self) -> float:
        return float(self._rng.randrange(self.width)) if self.width > 0 else 0.0

    def _random_speed(self) -> float:
        return self._rng.randrange(50, 150) / 100.0

    def _spawn(self) -> FallingShape:
        rng = self._rng
        cells = FALLING_TEMPLATES[rng.randrange(len(FALLING_TEMPLATES))]
        x = self._random_x()
        y = float(rng.randrange(-200, 0))
        speed = self._random_speed()
        rotation = float(rng.randrange(0, 360))
        color = COLORS[rng.randrange(len(COLORS))]
        return FallingShape(cells, x, y, speed, rotation, color)

    def tick(self) -> None:
        """Advance every shape one frame, respawning those far below."""
        for shape in self.shapes:
            shape.y += shape.speed
            shape.rotation += shape.speed * 0.5
            if shape.y > self.height + 100:
                shape.y = float(self._rng.randrange(-200, -50))
                shape.x = self._random_x()
                shape.speed = self._random_speed()
                shape.rotation = float(self._rng.randrange(0, 360))

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
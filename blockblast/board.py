"""The 12x12 playing field: placement, line detection and clearing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .shapes import BlockShape

BOARD_SIZE = 12
EMPTY_COLOR = "#2a2a3d"
FLASH_COLOR = "#ffffff"
BLOCKED_COLOR = "#ff000080"
PREVIEW_ALPHA = "80"
POINTS_PER_LINE = 50
ANIMATION_STEPS = 5
ANIMATION_INTERVAL_MS = 100

Position = tuple[int, int]
Line = tuple[Position, ...]


@dataclass
class ClearAnimation:
    """The flashing of full lines before they are removed."""

    lines: tuple[Line, ...]
    step: int = 0

    @property
    def cells(self) -> list[Position]:
        return [pos for line in self.lines for pos in line]

    @property
    def highlight(self) -> bool:
        return self.step % 2 == 1

    @property
    def finished(self) -> bool:
        return self.step >= ANIMATION_STEPS

    def advance(self) -> bool:
        """Move one frame on and return whether the cells are lit."""
        if self.finished:
            raise RuntimeError("animation already finished")
        self.step += 1
        return self.highlight


class GameBoard:
    """Which cells are filled, with what colour, and the pending clear."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = size
        self.colors: dict[Position, str] = {}
        self.animation: Optional[ClearAnimation] = None

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_filled(self, row: int, col: int) -> bool:
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return (row, col) in self.colors

    def can_place(self, shape: BlockShape, row: int, col: int) -> bool:
        for cell in shape.cells:
            r, c = row + cell.row, col + cell.col
            if not self._in_bounds(r, c) or (r, c) in self.colors:
                return False
        return True

    def can_place_any(self, shapes: Iterable[Optional[BlockShape]]) -> bool:
        """Whether any present shape fits anywhere; ``None`` entries are skipped."""
        return any(
            self.can_place(shape, row, col)
            for shape in shapes
            if shape is not None
            for row in range(self.size)
            for col in range(self.size)
        )

    def place(self, shape: BlockShape, row: int, col: int) -> Optional[ClearAnimation]:
        """Fill the shape's on-board cells and start clearing any full lines."""
        for cell in shape.cells:
            r, c = row + cell.row, col + cell.col
            if self._in_bounds(r, c):
                self.colors[(r, c)] = shape.color
        lines = self.full_lines()
        self.animation = ClearAnimation(lines) if lines else None
        return self.animation

    def _full(self, line: Line) -> bool:
        return all(pos in self.colors for pos in line)

    def full_lines(self) -> tuple[Line, ...]:
        """Full rows, then columns, then the main and the anti-diagonal."""
        n = self.size
        candidates: list[Line] = [tuple((r, c) for c in range(n)) for r in range(n)]
        candidates += [tuple((r, c) for r in range(n)) for c in range(n)]
        candidates.append(tuple((i, i) for i in range(n)))
        candidates.append(tuple((n - 1 - i, i) for i in range(n)))
        return tuple(line for line in candidates if self._full(line))

    def preview(self, shape: BlockShape, row: int, col: int) -> dict[Position, str]:
        """Highlight colours for the empty on-board cells a drop would cover."""
        tint = shape.color + PREVIEW_ALPHA if self.can_place(shape, row, col) else BLOCKED_COLOR
        result: dict[Position, str] = {}
        for cell in shape.cells:
            r, c = row + cell.row, col + cell.col
            if self._in_bounds(r, c) and (r, c) not in self.colors:
                result[(r, c)] = tint
        return result

    def finish_clearing(self) -> int:
        """Empty the pending lines and return the points they earn."""
        if self.animation is None:
            return 0
        for pos in self.animation.cells:
            self.colors.pop(pos, None)
        points = len(self.animation.lines) * POINTS_PER_LINE
        self.animation = None
        return points

    def clear(self) -> None:
        self.colors.clear()
        self.animation = None
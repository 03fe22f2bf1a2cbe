"""Block shapes, their templates and the drag-and-drop wire format."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass, field
from typing import Iterable, Union

MIME_TYPE = "application/x-blockshape"

COLORS: tuple[str, ...] = ("#ff6b6b", "#4ecdc4", "#45b7d1", "#96ceb4", "#ffeead")

_NULL_STRING = 0xFFFFFFFF
_INT = struct.Struct(">i")
_UINT = struct.Struct(">I")


@dataclass(frozen=True, order=True)
class Cell:
    """One square of a shape, relative to the shape's origin."""

    row: int
    col: int


CellLike = Union[Cell, tuple[int, int]]


def _to_cell(value: CellLike) -> Cell:
    if isinstance(value, Cell):
        return value
    row, col = value
    return Cell(row, col)


@dataclass(frozen=True)
class BlockShape:
    """A placeable piece: its cells, its colour and a unique id."""

    cells: tuple[Cell, ...] = field(default_factory=tuple)
    color: str = ""
    id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(_to_cell(c) for c in self.cells))


def _template(*pairs: tuple[int, int]) -> tuple[Cell, ...]:
    return tuple(Cell(r, c) for r, c in pairs)


SHAPE_TEMPLATES: tuple[tuple[Cell, ...], ...] = (
    _template((1, 1)),
    _template((0, 0), (0, 1)),
    _template((0, 0), (1, 0)),
    _template((0, 0), (0, 1), (0, 2)),
    _template((0, 0), (1, 0), (2, 0)),
    _template((0, 0), (1, 1), (2, 2)),
    _template((0, 2), (1, 1), (2, 0)),
    _template((0, 0), (0, 1), (1, 1)),
    _template((0, 0), (0, 1), (1, 0)),
    _template((0, 0), (1, 0), (1, 1)),
    _template((0, 1), (1, 0), (1, 1)),
    _template((0, 0), (0, 1), (1, 0), (1, 1)),
    _template((0, 0), (0, 1), (0, 2), (1, 1)),
    _template((0, 0), (0, 1), (1, 1), (2, 1)),
    _template((0, 0), (0, 1), (1, 0), (2, 0)),
    _template((0, 0), (1, 0), (1, 1), (1, 2)),
    _template((1, 0), (1, 1), (1, 2), (0, 2)),
    _template((0, 1), (1, 1), (2, 1), (2, 0)),
    _template((0, 0), (1, 0), (2, 0), (2, 1)),
    _template((0, 0), (0, 1), (1, 1), (1, 2)),
    _template((0, 2), (0, 1), (1, 1), (1, 0)),
    _template((0, 0), (1, 0), (1, 1), (2, 1)),
    _template((0, 1), (1, 1), (1, 0), (2, 0)),
    _template((0, 0), (0, 1), (0, 2), (0, 3)),
    _template((0, 0), (1, 0), (2, 0), (3, 0)),
    _template((0, 0), (0, 1), (0, 2), (1, 2), (2, 2)),
    _template((0, 0), (0, 1), (0, 2), (1, 0), (2, 0)),
    _template((2, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
    _template((2, 0), (2, 1), (0, 0), (1, 0), (2, 2)),
    _template((2, 0), (2, 1), (2, 2), (2, 3), (2, 4)),
    _template((0, 2), (1, 2), (2, 2), (3, 2), (4, 2)),
    _template(
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ),
)


def random_shape(shape_id: int, rng: random.Random | None = None) -> BlockShape:
    """Pick a random template and colour and give the shape the id given."""
    rng = rng if rng is not None else random.Random()
    cells = SHAPE_TEMPLATES[rng.randrange(len(SHAPE_TEMPLATES))]
    color = COLORS[rng.randrange(len(COLORS))]
    return BlockShape(cells, color, shape_id)


def _encode_string(text: str) -> bytes:
    raw = text.encode("utf-16-be")
    return _UINT.pack(len(raw)) + raw


def encode_shape(shape: BlockShape) -> bytes:
    """Serialise a shape as big-endian id, UTF-16 colour, cell count and cells."""
    parts = [_INT.pack(shape.id), _encode_string(shape.color), _INT.pack(len(shape.cells))]
    parts.extend(_INT.pack(cell.row) + _INT.pack(cell.col) for cell in shape.cells)
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        if self._pos + size > len(self._view):
            raise ValueError("shape data is truncated")
        chunk = bytes(self._view[self._pos:self._pos + size])
        self._pos += size
        return chunk

    def int32(self) -> int:
        return _INT.unpack(self.take(_INT.size))[0]

    def string(self) -> str:
        length = _UINT.unpack(self.take(_UINT.size))[0]
        if length == _NULL_STRING:
            return ""
        if length % 2:
            raise ValueError("string length is not a whole number of UTF-16 units")
        return self.take(length).decode("utf-16-be")


def decode_shape(data: bytes) -> BlockShape:
    """Read a shape written by :func:`encode_shape`."""
    reader = _Reader(data)
    shape_id = reader.int32()
    color = reader.string()
    count = reader.int32()
    if count < 0:
        raise ValueError("negative cell count")
    cells: Iterable[Cell] = [Cell(reader.int32(), reader.int32()) for _ in range(count)]
    return BlockShape(tuple(cells), color, shape_id)
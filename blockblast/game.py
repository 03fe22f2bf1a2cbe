"""Game flow: screens, the three spawn slots, scoring and game over."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .board import GameBoard
from .shapes import BlockShape, random_shape

CELL_PIXELS = 50
SLOT_COUNT = 3
PLACEMENT_POINTS = 10
LOADING_STEP = 5
LOADING_DONE = 100
LOADING_INTERVAL_MS = 200
SCREAMER_MS = 4000
SCORE_LABEL = "Счет: {}"


class Screen(enum.IntEnum):
    """The screens the game moves between."""

    LOADING = 0
    MENU = 1
    GAME = 2
    SCREAMER = 3


def _cell_at(x: int, y: int) -> tuple[int, int]:
    return int(y / CELL_PIXELS), int(x / CELL_PIXELS)


class Game:
    """The state behind the window: current screen, board, slots and score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = GameBoard()
        self.screen = Screen.LOADING
        self.loading_progress = 0
        self.slots: list[Optional[BlockShape]] = [None] * SLOT_COUNT
        self.score = 0
        self.next_shape_id = 0

    @property
    def score_text(self) -> str:
        return SCORE_LABEL.format(self.score)

    def advance_loading(self) -> int:
        """Move the loading bar on one step; at 100 the menu is shown."""
        if self.loading_progress < LOADING_DONE:
            self.loading_progress += LOADING_STEP
            if self.loading_progress >= LOADING_DONE:
                self.screen = Screen.MENU
        return self.loading_progress

    def start(self) -> None:
        """Reset the score, deal three new shapes and show the game screen."""
        self.slots = [None] * SLOT_COUNT
        self.score = 0
        self._generate_shapes()
        self.screen = Screen.GAME

    def return_to_menu(self) -> None:
        self.screen = Screen.MENU
        self.board.clear()

    def _generate_shapes(self) -> None:
        for index in range(SLOT_COUNT):
            self.slots[index] = random_shape(self.next_shape_id, self.rng)
            self.next_shape_id += 1

    def _end_game(self) -> None:
        self.screen = Screen.SCREAMER

    def handle_drop(self, shape_id: int, x: int, y: int) -> bool:
        """Drop the shape with this id at a pixel position; return whether it was placed."""
        row, col = _cell_at(x, y)
        for index, shape in enumerate(self.slots):
            if shape is None or shape.id != shape_id:
                continue
            if not self.board.can_place(shape, row, col):
                return False
            self.board.place(shape, row, col)
            self.slots[index] = None
            self.update_score(PLACEMENT_POINTS)
            if all(slot is None for slot in self.slots):
                self._generate_shapes()
            if not self.board.can_place_any(self.slots):
                self._end_game()
            return True
        return False

    def update_score(self, points: int) -> int:
        self.score += points
        return self.score

    def tick_clearing(self) -> Optional[bool]:
        """Advance the line-clearing flash one frame.

        Returns whether the cells are lit on this frame, or ``None`` when
        nothing is being cleared. On the last frame the lines are removed
        and their points added to the score.
        """
        animation = self.board.animation
        if animation is None:
            return None
        lit = animation.advance()
        if animation.finished:
            points = self.board.finish_clearing()
            if points > 0:
                self.update_score(points)
        return lit
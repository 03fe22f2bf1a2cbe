"""Text-mode front end: loading bar, menu, board and shape slots."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Optional, TextIO

from .board import ANIMATION_INTERVAL_MS, BLOCKED_COLOR
from .game import (
    CELL_PIXELS,
    LOADING_DONE,
    LOADING_INTERVAL_MS,
    SCREAMER_MS,
    SLOT_COUNT,
    Game,
    Screen,
)
from .shapes import COLORS, BlockShape

TITLE = "BlockBlast"
_LETTERS = dict(zip(COLORS, "ABCDE"))
_BAR_WIDTH = 20
_HELP = (
    "Commands: place SLOT ROW COL | drop SLOT X Y | preview SLOT ROW COL | menu | quit"
)


def point_to_cell(x: int, y: int) -> tuple[int, int]:
    """The (row, column) of the board cell under a pixel position."""
    return int(y / CELL_PIXELS), int(x / CELL_PIXELS)


def _shape_lines(shape: BlockShape) -> list[str]:
    occupied = {(cell.row, cell.col) for cell in shape.cells}
    if not occupied:
        return []
    rows = max(r for r, _ in occupied) + 1
    cols = max(c for _, c in occupied) + 1
    return [
        "".join("#" if (r, c) in occupied else " " for c in range(cols)).rstrip()
        for r in range(rows)
    ]


class BlockBlastApp:
    """Drives a :class:`Game` from lines of text input."""

    def __init__(
        self,
        game: Game | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.game = game if game is not None else Game()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._sleep = sleep

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> Optional[str]:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> int:
        """Run until the player exits or input ends."""
        self._show_loading()
        handlers = {
            Screen.MENU: self._menu,
            Screen.GAME: self._turn,
            Screen.SCREAMER: self._scream,
        }
        while handlers[self.game.screen]():
            pass
        return 0

    def _show_loading(self) -> None:
        game = self.game
        if game.screen is not Screen.LOADING:
            return
        self._say(TITLE)
        while game.screen is Screen.LOADING:
            self._sleep(LOADING_INTERVAL_MS / 1000)
            progress = game.advance_loading()
            filled = _BAR_WIDTH * progress // LOADING_DONE
            self._say(f"[{'=' * filled}{' ' * (_BAR_WIDTH - filled)}] {progress}%")

    def _menu(self) -> bool:
        self._say()
        self._say(TITLE)
        self._say("1) Начать игру")
        self._say("2) Настройки")
        self._say("3) Выход")
        choice = self._ask("> ")
        if choice is None or choice == "3":
            return False
        if choice == "1":
            self.game.start()
        elif choice != "2":
            self._say(f"Unknown choice: {choice}")
        return True

    def _turn(self) -> bool:
        self._render()
        line = self._ask("> ")
        if line is None:
            return False
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]
        if command == "quit":
            return False
        if command == "menu":
            self.game.return_to_menu()
        elif command in ("place", "drop", "preview"):
            try:
                self._shape_command(command, args)
            except ValueError as exc:
                self._say(f"Error: {exc}")
        else:
            self._say(f"Unknown command: {command}")
            self._say(_HELP)
        return True

    def _scream(self) -> bool:
        self._out.write("\a")
        self._say("!!! GAME OVER !!!")
        self._say(self.game.score_text)
        self._sleep(SCREAMER_MS / 1000)
        self.game.return_to_menu()
        return True

    def _slot_shape(self, slot: int) -> BlockShape:
        if not 1 <= slot <= SLOT_COUNT:
            raise ValueError(f"slot must be between 1 and {SLOT_COUNT}")
        shape = self.game.slots[slot - 1]
        if shape is None:
            raise ValueError(f"slot {slot} is empty")
        return shape

    def _shape_command(self, command: str, args: list[str]) -> None:
        if len(args) != 3:
            raise ValueError(f"{command} needs a slot and two coordinates")
        slot, first, second = (int(value) for value in args)
        shape = self._slot_shape(slot)
        if command == "preview":
            tints = self.game.board.preview(shape, first, second)
            marks = {pos: "x" if tint == BLOCKED_COLOR else "+" for pos, tint in tints.items()}
            self._say(self._board_text(marks))
            return
        if command == "place":
            x, y = second * CELL_PIXELS, first * CELL_PIXELS
        else:
            x, y = first, second
        row, col = point_to_cell(x, y)
        if self.game.handle_drop(shape.id, x, y):
            self._play_clearing()
        else:
            self._say(f"Shape {slot} does not fit at row {row}, column {col}")

    def _play_clearing(self) -> None:
        board = self.game.board
        while board.animation is not None:
            cells = board.animation.cells
            self._sleep(ANIMATION_INTERVAL_MS / 1000)
            if self.game.tick_clearing():
                self._say(self._board_text({pos: "*" for pos in cells}))

    def _board_text(self, marks: dict[tuple[int, int], str] | None = None) -> str:
        marks = marks or {}
        board = self.game.board
        lines = ["    " + "".join(f"{c:>2}" for c in range(board.size))]
        for r in range(board.size):
            row = []
            for c in range(board.size):
                if (r, c) in marks:
                    row.append(marks[(r, c)])
                elif (r, c) in board.colors:
                    row.append(_LETTERS.get(board.colors[(r, c)], "#"))
                else:
                    row.append(".")
            lines.append(f"{r:>2}  " + "".join(f" {ch}" for ch in row))
        return "\n".join(lines)

    def _render(self) -> None:
        self._say()
        self._say(self.game.score_text)
        self._say(self._board_text())
        for number, shape in enumerate(self.game.slots, start=1):
            if shape is None:
                self._say(f"{number}) (empty)")
                continue
            self._say(f"{number}) shape {shape.id}")
            for line in _shape_lines(shape):
                self._say(f"   {line}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="blockblast", description="Play BlockBlast in a terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shape generator")
    parser.add_argument("--no-delay", action="store_true", help="skip loading and animation pauses")
    args = parser.parse_args(argv)
    game = Game(random.Random(args.seed))
    sleep: Callable[[float], object] = (lambda _seconds: None) if args.no_delay else time.sleep
    return BlockBlastApp(game, sleep=sleep).run()


if __name__ == "__main__":
    raise SystemExit(main())
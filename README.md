# blockblast

A block-placing puzzle game played in the terminal. You are dealt three
shapes at a time and place them on a 12×12 board. Whenever a row, a column or
one of the two main diagonals is completely filled, it flashes and clears.

## Rules

- Each shape you place earns 10 points.
- Each cleared line (row, column or diagonal) earns 50 points.
- A shape may only be placed where all of its cells land on empty squares
  inside the board.
- When all three shapes have been placed, three new ones are dealt.
- The game ends when none of the shapes you still hold fits anywhere on the
  board. A "GAME OVER" message and your score are shown, and after a pause
  you are returned to the menu with the board cleared.

## Installing and playing

```
pip install .
blockblast
```

Options:

- `--seed N` — seed the shape generator, so the same shapes are dealt each time.
- `--no-delay` — skip the pauses of the loading bar, the clearing flash and
  the game-over screen.

After the loading bar the menu offers `1` to start a game, `2` for settings
(which has nothing in it yet) and `3` to exit.

During a game the board is printed with `.` for empty squares and a letter
for each filled one (one letter per shape colour), followed by your three
shapes drawn with `#`. Commands:

- `place SLOT ROW COL` — put the shape in slot 1, 2 or 3 with its origin at
  that row and column (both counted from 0).
- `drop SLOT X Y` — the same, given as a pixel position on a board whose
  squares are 50 pixels wide.
- `preview SLOT ROW COL` — show the empty squares the shape would cover:
  `+` where it fits, `x` where it does not.
- `menu` — go back to the menu and clear the board.
- `quit` — leave the game.

The game also ends when input runs out.

## Using the game logic from Python

The board and shape rules can be used without the terminal front end:

```python
import random

from blockblast.board import GameBoard
from blockblast.shapes import random_shape

rng = random.Random(1)
board = GameBoard()
shape = random_shape(0, rng)

if board.can_place(shape, 0, 0):
    board.place(shape, 0, 0)

print(board.is_filled(0, 0))
```

The modules are:

- `blockblast.shapes` — `Cell`, `BlockShape`, the set of shapes the game
  deals (`random_shape`), and `encode_shape` / `decode_shape`, which write
  and read a shape as bytes (id, colour, and cells).
- `blockblast.board` — `GameBoard`, which tracks filled squares, checks
  placements (`can_place`, `can_place_any`), finds full lines
  (`full_lines`), gives placement previews (`preview`) and holds the
  clearing animation (`ClearAnimation`) until `finish_clearing` empties the
  lines and returns their points.
- `blockblast.falling` — `FallingShapes`, a field of decorative shapes that
  fall, spin and reappear above the top edge on each `tick`.
- `blockblast.game` — `Game`, which ties the board, the three dealt shapes,
  the score and the current `Screen` together (`start`, `handle_drop`,
  `tick_clearing`, `return_to_menu`, `advance_loading`).
- `blockblast.app` — `BlockBlastApp`, the terminal front end, `point_to_cell`
  and the `main` entry point.

## What it does not do

The game runs in a text terminal only. There is no graphical window, no
dragging of shapes with the mouse and no sound; the game-over screen is a
terminal bell and a message. `FallingShapes` computes the motion of the
decorative background shapes, but the terminal front end does not draw them.
The settings menu entry does nothing.

## Running the tests

```
pip install .[test]
pytest
```
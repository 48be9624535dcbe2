# minesweep

Minesweeper for the terminal. The game logic is also available as a small library.

## Installing

```
pip install .
```

## Playing

```
minesweep
```

`python -m minesweep.cli` starts the same game.

The game begins by asking three questions:

1. Whether to use ANSI escape codes for colours. Any answer except `n` turns colours on, and that includes just pressing Enter. Answer `n` to turn them off.
2. The board size, entered as `Columns,Rows`, for example `10,8`. Both numbers must be positive whole numbers. If they are not, the game asks again.
3. The number of bombs. The suggested number is 21% of the cells, rounded down, minus one. Press Enter, or type anything that is not a number, to take it.

Keys:

| Key                | Action                   |
|--------------------|--------------------------|
| Arrow keys         | Move the selection       |
| `O` / Enter        | Open the selected cell   |
| `F` / Space        | Place or remove a flag   |
| `Q` / Esc          | Quit                     |

Bombs are placed when you open your first cell. No bomb is placed within a distance of 0.13 × the board width of that first cell. Opening a cell with no neighbouring bombs also opens every connected empty cell and the numbered cells around them.

You can place at most as many flags as there are bombs. You win as soon as the number of flags equals the number of bombs and every flag sits on a bomb. You lose if you open a bomb. When the game ends, the whole board is shown. Press any key to leave.

If you ask for more bombs than there are free cells, the game stops with a `ValueError` when you open the first cell.

## Using the library

`minesweep.core` holds the rules:

- `new_board(cols, rows)` returns an empty board.
- `board_size(board)` returns the board's size as `(cols, rows)`.
- `random_bombs(board, start, count, rng=None)` returns `count` distinct bomb positions, none of them near `start`. It raises `ValueError` if there are not enough free cells.
- `cell_numbers(board, bombs)` marks the bombs and counts them into the neighbouring cells. It changes the board in place and also returns it.
- `opened_cells(board, selected)` returns the set of cells that opening `selected` reveals. It raises `IndexError` if `selected` is off the board.
- `game_state(board, bombs_count, flagged, point)` returns a `GameState`: `PLAYING`, `WON` or `LOST`.

```python
import random

from minesweep.core import (
    GameState,
    cell_numbers,
    game_state,
    new_board,
    opened_cells,
    random_bombs,
)

board = new_board(9, 9)
bombs = random_bombs(board, (4, 4), 10, random.Random(1))
board = cell_numbers(board, bombs)

opened = opened_cells(board, (4, 4))
state = game_state(board, len(bombs), None, (4, 4))
assert state is GameState.PLAYING
```

A board is indexed as `board[y][x]`. Points are `(x, y)` tuples, and a bomb cell holds `-1`.

`minesweep.game` provides a `Game` class for one round of play:

- `move(dx, dy)` moves the selection. Up is `dy=+1`.
- `toggle_flag()` places or removes a flag on the selected cell.
- `open_cell()` opens the selected cell.

The same module provides `format_cell` and `format_grid`, which render the screen as text. `minesweep.theme.Theme` chooses the symbols and whether they are coloured.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Game session state and board rendering."""

from __future__ import annotations

import random
from collections.abc import Collection

from minesweep.core import (
    BOMB as BOMB_CELL,
    Board,
    GameState,
    Point,
    cell_numbers,
    game_state,
    new_board,
    opened_cells,
    random_bombs,
)
from minesweep.theme import BOMB, FLAG, UNOPENED, Theme

HELP_MESSAGE = "[Arrows: Move] [O & Enter: Open Cell]\n[F & Space: Flag] [Q & ESC: Quit]"
START_MESSAGE = HELP_MESSAGE + "\nSelect a cell to start game"
WIN_MESSAGE = "You Win :)"
LOSE_MESSAGE = "Game Over :("


def format_cell(theme: Theme, data: str, selected: bool) -> str:
    """Render one cell, bracketed (and blinking with colours) when selected."""
    if selected:
        if theme.using_escape_codes:
            return f"\x1b[5m[\x1b[25m{data}\x1b[5m]\x1b[25m"
        return f"[{data}]"
    if theme.using_escape_codes:
        if data == FLAG:
            return f"\x1b[102m\x1b[36m[{FLAG}]\x1b[0m"
        if data == BOMB:
            return f"\x1b[101m\x1b[31m[{BOMB}]\x1b[0m"
    return f" {data} "


def format_grid(
    theme: Theme,
    board: Board,
    bombs_count: int,
    flagged: Collection[Point],
    opened: Collection[Point] | None,
    selected: Point,
    message: str,
) -> str:
    """Render the whole screen, top row first.

    With ``opened`` set to None every cell is shown uncovered.
    """
    rows = len(board)
    cols = len(board[0]) if board else 0
    parts = [
        "\x1b[H\x1b[J",
        f" [Size: {cols}×{rows}] [Bombs: {bombs_count}] "
        f"[Flags: {bombs_count - len(flagged)}]\n",
    ]
    for y in reversed(range(rows)):
        for x, value in enumerate(board[y]):
            point = (x, y)
            if point in flagged:
                data = theme.default_symbol(FLAG)
            elif opened is not None and point not in opened:
                data = theme.default_symbol(UNOPENED)
            elif value == BOMB_CELL:
                data = theme.default_symbol(BOMB)
            else:
                data = theme.colorise_number(value)
            parts.append(format_cell(theme, data, point == selected))
        parts.append("\n")
    parts.append(f"\n{message}")
    return "".join(parts)


class Game:
    """One round: the board, the cursor, flags and opened cells.

    Bombs are placed on the first opened cell so that it is never a bomb.
    """

    def __init__(
        self,
        cols: int,
        rows: int,
        bombs_count: int,
        theme: Theme | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.cols = cols
        self.rows = rows
        self.bombs_count = bombs_count
        self.theme = theme if theme is not None else Theme()
        self.rng = rng
        self.board = new_board(cols, rows)
        self.flagged: set[Point] = set()
        self.opened: set[Point] = set()
        self.bombs: list[Point] | None = None
        self.selected: Point = (cols // 2, rows // 2)
        self.message = START_MESSAGE
        self.state = GameState.PLAYING

    def move(self, dx: int, dy: int) -> Point:
        """Move the cursor, staying on the board; up is ``dy=+1``."""
        x, y = self.selected
        if 0 <= x + dx < self.cols:
            x += dx
        if 0 <= y + dy < self.rows:
            y += dy
        self.selected = (x, y)
        return self.selected

    def toggle_flag(self) -> GameState:
        """Flag or unflag the selected cell; flags never exceed the bomb count."""
        if self.selected in self.flagged:
            self.flagged.discard(self.selected)
        elif len(self.flagged) < self.bombs_count:
            self.flagged.add(self.selected)
            if game_state(self.board, self.bombs_count, self.flagged, self.selected) is GameState.WON:
                self.state = GameState.WON
                self.message = WIN_MESSAGE
        return self.state

    def open_cell(self) -> GameState:
        """Open the selected cell, placing the bombs first if none are yet."""
        if self.bombs is None:
            self.bombs = random_bombs(self.board, self.selected, self.bombs_count, self.rng)
            cell_numbers(self.board, self.bombs)
            self.message = HELP_MESSAGE
        self.opened |= opened_cells(self.board, self.selected)
        if game_state(self.board, self.bombs_count, None, self.selected) is GameState.LOST:
            self.state = GameState.LOST
            self.message = LOSE_MESSAGE
        return self.state
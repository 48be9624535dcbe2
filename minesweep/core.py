"""Board generation, numbering, flood opening and win/loss detection."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Collection, Iterable

Point = tuple[int, int]
Board = list[list[int]]

BOMB = -1
RADIUS_FACTOR = 0.13

_NEIGHBOURS = ((-1, 0), (0, 1), (1, 0), (0, -1), (1, 1), (-1, -1), (1, -1), (-1, 1))


class GameState(enum.IntEnum):
    """Outcome of a move."""

    PLAYING = 0
    WON = 1
    LOST = 2


def new_board(cols: int, rows: int) -> Board:
    """Return an empty board of ``rows`` rows, each ``cols`` cells wide."""
    return [[0] * cols for _ in range(rows)]


def board_size(board: Board) -> tuple[int, int]:
    """Return ``(cols, rows)`` of a board; an empty board is ``(0, 0)``."""
    if not board:
        return 0, 0
    return len(board[0]), len(board)


def _check_inside(board: Board, point: Point) -> None:
    cols, rows = board_size(board)
    x, y = point
    if not (0 <= x < cols and 0 <= y < rows):
        raise IndexError(f"point {point} is outside a {cols}x{rows} board")


def random_bombs(
    board: Board, start: Point, count: int, rng: random.Random | None = None
) -> list[Point]:
    """Place ``count`` distinct bombs, keeping clear of a circle around ``start``.

    The radius of the bomb-free circle grows with the board's width.
    """
    if count <= 0:
        return []
    if rng is None:
        rng = random.Random()
    cols, rows = board_size(board)
    radius = RADIUS_FACTOR * cols
    x0, y0 = start
    candidates = [
        (x, y)
        for y in range(rows)
        for x in range(cols)
        if math.hypot(x - x0, y - y0) >= radius
    ]
    if count > len(candidates):
        raise ValueError(
            f"cannot place {count} bombs: only {len(candidates)} cells are free"
        )
    return rng.sample(candidates, count)


def cell_numbers(board: Board, bombs: Iterable[Point]) -> Board:
    """Mark bombs on the board and count them into the surrounding cells.

    The board is updated in place and returned.
    """
    cols, rows = board_size(board)
    for x0, y0 in bombs:
        board[y0][x0] = BOMB
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                x, y = x0 + dx, y0 + dy
                if 0 <= x < cols and 0 <= y < rows and board[y][x] != BOMB:
                    board[y][x] += 1
    return board


def opened_cells(board: Board, selected: Point) -> set[Point]:
    """Return the cells revealed by opening ``selected``.

    Opening a zero cell spreads to every connected zero and its border.
    """
    _check_inside(board, selected)
    cols, rows = board_size(board)
    opened = {selected}
    x0, y0 = selected
    if board[y0][x0] != 0:
        return opened
    stack = [selected]
    while stack:
        x, y = stack.pop()
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < cols and 0 <= ny < rows):
                continue
            point = (nx, ny)
            if point in opened or board[ny][nx] == BOMB:
                continue
            opened.add(point)
            if board[ny][nx] == 0:
                stack.append(point)
    return opened


def game_state(
    board: Board,
    bombs_count: int,
    flagged: Collection[Point] | None,
    point: Point,
) -> GameState:
    """Judge the game.

    With no flags given, ``point`` is the cell just opened and hitting a bomb
    loses. The game is won once exactly ``bombs_count`` cells are flagged and
    every one of them holds a bomb.
    """
    if flagged is None:
        _check_inside(board, point)
        x, y = point
        if board[y][x] == BOMB:
            return GameState.LOST
        flagged = ()
    if len(flagged) == bombs_count and all(board[y][x] == BOMB for x, y in flagged):
        return GameState.WON
    return GameState.PLAYING
"""Terminal front end: asks for the board settings and runs the game."""

from __future__ import annotations

import sys

from minesweep.core import GameState
from minesweep.game import Game, format_grid
from minesweep.theme import Theme

_LEAVE_SCREEN = "\x1b[?1049l\x1b[?25h"


def parse_size(text: str) -> tuple[int, int]:
    """Parse ``"columns,rows"`` into a pair of positive integers."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected 'columns,rows', got {text!r}")
    cols, rows = (int(part.strip()) for part in parts)
    if cols < 1 or rows < 1:
        raise ValueError(f"board size must be positive, got {cols},{rows}")
    return cols, rows


def suggested_bombs(cols: int, rows: int) -> int:
    """Default bomb count: about a fifth of the cells, less one."""
    return int(cols * rows * 0.21) - 1


def _draw(game: Game, reveal: bool = False) -> None:
    opened = None if reveal else game.opened
    print(
        format_grid(
            game.theme,
            game.board,
            game.bombs_count,
            game.flagged,
            opened,
            game.selected,
            game.message,
        ),
        flush=True,
    )


def _ask_theme() -> Theme:
    try:
        answer = input(
            "Do you want to use ANSI Escape codes [(y)Yes/(n)No] ('y' is default) ? "
        )
    except EOFError:
        answer = ""
    return Theme(using_escape_codes=answer.strip() != "n")


def _ask_size() -> tuple[int, int]:
    while True:
        text = input("Enter The Columns,Rows: ")
        try:
            return parse_size(text)
        except ValueError:
            print("Please Input values in format: Columns,Rows")


def _ask_bombs(cols: int, rows: int) -> int:
    suggested = suggested_bombs(cols, rows)
    try:
        return int(input(f"\nEnter The count of bombs (default {suggested} bombs): "))
    except (ValueError, EOFError):
        return suggested


def _play(game: Game) -> None:
    from blessed import Terminal

    term = Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        _draw(game, reveal=True)
        while game.state is GameState.PLAYING:
            key = term.inkey()
            code = key.code
            char = str(key).lower() if not key.is_sequence else ""
            if code == term.KEY_LEFT:
                game.move(-1, 0)
            elif code == term.KEY_RIGHT:
                game.move(1, 0)
            elif code == term.KEY_UP:
                game.move(0, 1)
            elif code == term.KEY_DOWN:
                game.move(0, -1)
            if char == "q" or code == term.KEY_ESCAPE:
                break
            if char in ("f", " "):
                game.toggle_flag()
            if char in ("o", "\n", "\r") or code == term.KEY_ENTER:
                if game.state is GameState.PLAYING:
                    game.open_cell()
            if game.state is not GameState.PLAYING:
                _draw(game, reveal=True)
                print("Press something to exit\n", flush=True)
                term.inkey()
                break
            _draw(game)
    print(_LEAVE_SCREEN, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run an interactive game in the terminal."""
    del argv
    theme = _ask_theme()
    print("Welcome to MineSweeper in the terminal")
    try:
        cols, rows = _ask_size()
    except EOFError:
        return 1
    bombs = _ask_bombs(cols, rows)
    _play(Game(cols, rows, bombs, theme=theme))
    return 0


if __name__ == "__main__":
    sys.exit(main())
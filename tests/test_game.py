import random

from minesweep.core import GameState, cell_numbers, new_board
from minesweep.game import (
    HELP_MESSAGE,
    LOSE_MESSAGE,
    START_MESSAGE,
    WIN_MESSAGE,
    Game,
    format_cell,
    format_grid,
)
from minesweep.theme import BOMB, UNOPENED, ZERO, Theme


def _started_game(seed=3):
    game = Game(5, 5, 3, rng=random.Random(seed))
    game.open_cell()
    return game


def test_format_cell_plain():
    theme = Theme()
    assert format_cell(theme, "x", True) == "[x]"
    assert format_cell(theme, "x", False) == " x "


def test_format_cell_selected_with_escapes():
    cell = format_cell(Theme(True), "x", True)
    assert cell == "\x1b[5m[\x1b[25mx\x1b[5m]\x1b[25m"


def test_format_grid_revealed():
    board = cell_numbers(new_board(2, 1), [(0, 0)])
    text = format_grid(Theme(), board, 1, set(), None, (5, 5), "m")
    assert text == "\x1b[H\x1b[J [Size: 2×1] [Bombs: 1] [Flags: 1]\n δ  1 \n\nm"


def test_format_grid_top_row_first():
    board = cell_numbers(new_board(1, 2), [(0, 1)])
    lines = format_grid(Theme(), board, 1, set(), None, (5, 5), "").splitlines()
    assert lines[1] == f" {BOMB} "
    assert lines[2] == " 1 "


def test_format_grid_unopened_and_flags():
    board = new_board(3, 3)
    text = format_grid(Theme(), board, 2, {(0, 0)}, set(), (1, 1), "")
    assert text.count(UNOPENED) == 8
    assert "[Flags: 1]" in text
    assert f"[{UNOPENED}]" in text
    assert ZERO not in text


def test_move_stays_on_board():
    game = Game(3, 3, 1)
    assert game.selected == (1, 1)
    game.move(-1, 0)
    assert game.move(-1, 0) == (0, 1)
    game.move(0, 1)
    assert game.move(0, 1) == (0, 2)
    game.move(1, -1)
    assert game.selected == (1, 1)


def test_first_open_is_safe():
    for seed in range(10):
        game = Game(5, 5, 3, rng=random.Random(seed))
        assert game.message == START_MESSAGE
        assert game.open_cell() is GameState.PLAYING
        assert game.selected in game.opened
        assert game.selected not in game.bombs
        assert len(game.bombs) == 3
        assert game.message == HELP_MESSAGE


def test_open_bomb_loses():
    game = _started_game()
    game.selected = game.bombs[0]
    assert game.open_cell() is GameState.LOST
    assert game.state is GameState.LOST
    assert game.message == LOSE_MESSAGE


def test_flag_all_bombs_wins():
    game = _started_game()
    states = []
    for bomb in game.bombs:
        game.selected = bomb
        states.append(game.toggle_flag())
    assert states[-1] is GameState.WON
    assert all(state is GameState.PLAYING for state in states[:-1])
    assert game.message == WIN_MESSAGE


def test_toggle_flag_twice_removes_it():
    game = Game(3, 3, 1)
    game.toggle_flag()
    assert game.flagged == {(1, 1)}
    game.toggle_flag()
    assert game.flagged == set()


def test_flags_limited_to_bomb_count():
    game = Game(3, 3, 1)
    game.toggle_flag()
    game.move(1, 0)
    assert game.toggle_flag() is GameState.PLAYING
    assert game.flagged == {(1, 1)}


def test_wrong_flags_do_not_win():
    game = _started_game()
    safe = next(
        (x, y) for x in range(5) for y in range(5) if (x, y) not in game.bombs
    )
    for point in [safe, *game.bombs[1:]]:
        game.selected = point
        game.toggle_flag()
    assert len(game.flagged) == 3
    assert game.state is GameState.PLAYING
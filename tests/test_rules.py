from typing import List

import pytest
from hypothesis import given, strategies as st

from tictactoe.core.board import Board
from tictactoe.core.rules import WIN_LINES, check_winner, check_winner_with_line, is_draw
from tictactoe.types import Cell, Outcome


def test_there_are_eight_distinct_lines():
    assert len(WIN_LINES) == 8
    assert len(set(WIN_LINES)) == 8
    for line in WIN_LINES:
        assert all(0 <= r < 3 and 0 <= c < 3 for r, c in line)


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark,expected", [(Cell.X, Outcome.X_WINS), (Cell.O, Outcome.O_WINS)])
def test_every_line_wins(line, mark, expected):
    b = Board()
    for r, c in line:
        b.place(r, c, mark)
    assert check_winner(b) is expected
    assert check_winner_with_line(b) == (mark, list(line))


def test_row_win():
    assert check_winner(Board.from_rows(["XXX", "___", "___"])) is Outcome.X_WINS


def test_column_win():
    b = Board.from_rows(["X_O", "X_O", "_XO"])
    assert check_winner(b) is Outcome.O_WINS


def test_diagonal_wins():
    assert check_winner(Board.from_rows(["X__", "_X_", "__X"])) is Outcome.X_WINS
    assert check_winner(Board.from_rows(["__O", "_O_", "O__"])) is Outcome.O_WINS


def test_first_line_in_scan_order_is_reported():
    # Row 0 and column 0 both complete; rows are scanned first.
    b = Board.from_rows(["XXX", "X_O", "XOO"])
    assert check_winner_with_line(b) == (Cell.X, [(0, 0), (0, 1), (0, 2)])


def test_empty_and_mixed_lines_do_not_win():
    assert check_winner(Board()) is Outcome.NO_WINNER_YET
    assert check_winner(Board.from_rows(["XXO", "___", "___"])) is Outcome.NO_WINNER_YET
    assert check_winner_with_line(Board()) is None


def test_full_board_without_line_is_draw():
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    assert check_winner(b) is Outcome.NO_WINNER_YET
    assert is_draw(b)


def test_full_board_with_line_is_not_draw():
    b = Board.from_rows(["XXX", "OOX", "XOO"])
    assert not is_draw(b)


def test_partial_board_is_not_draw():
    assert not is_draw(Board.from_rows(["XO_", "___", "___"]))


cells = st.sampled_from([Cell.X, Cell.O, Cell.EMPTY])


@given(st.lists(cells, min_size=9, max_size=9))
def test_evaluation_is_idempotent_and_pure(flat: List[Cell]):
    b = Board([flat[0:3], flat[3:6], flat[6:9]])
    before = b.copy()
    first = check_winner(b)
    second = check_winner(b)
    assert first is second
    assert b.grid == before.grid

from __future__ import annotations
from typing import Optional, List, Tuple

from tictactoe.core.board import Board
from tictactoe.types import Cell, Outcome, WINS_BY_MARK

Coord = Tuple[int, int]  # (row, col)
Line = Tuple[Coord, Coord, Coord]

# Scan order matters: the first complete line wins.
WIN_LINES: Tuple[Line, ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Main diagonal
    ((0, 0), (1, 1), (2, 2)),
    # Anti-diagonal
    ((0, 2), (1, 1), (2, 0)),
)


def check_winner_with_line(board: Board) -> Optional[Tuple[Cell, List[Coord]]]:
    g = board.grid

    for line in WIN_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        p = g[r0][c0]
        if p is not Cell.EMPTY and p == g[r1][c1] == g[r2][c2]:
            return p, list(line)

    return None


def check_winner(board: Board) -> Outcome:
    res = check_winner_with_line(board)
    return WINS_BY_MARK[res[0]] if res else Outcome.NO_WINNER_YET


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is Outcome.NO_WINNER_YET

from __future__ import annotations
import string

from tictactoe.config import ROWS, COLS
from tictactoe.core.board import Board
from tictactoe.errors import InvalidMove, MoveError
from tictactoe.types import Cell, Move


def _axis(ch: str, size: int, not_digit: MoveError, out_of_range: MoveError, raw: str) -> int:
    # str.isdigit() accepts things like "²"; only plain ASCII digits count here.
    if ch not in string.digits:
        raise InvalidMove(not_digit, raw)
    idx = int(ch) - 1
    if idx < 0 or idx >= size:
        raise InvalidMove(out_of_range, raw)
    return idx


def parse_move(raw: str) -> Move:
    """
    Turn "rowcol" text such as "13" into a zero-based Move.

    Checks run in a fixed order and the first failure is reported: length,
    then the row digit and its range, then the column digit and its range.
    """
    s = raw.strip()
    if len(s) != 2:
        raise InvalidMove(MoveError.MALFORMED_LENGTH, raw)

    row = _axis(s[0], ROWS, MoveError.ROW_NOT_DIGIT, MoveError.ROW_OUT_OF_RANGE, raw)
    col = _axis(s[1], COLS, MoveError.COL_NOT_DIGIT, MoveError.COL_OUT_OF_RANGE, raw)
    return Move(row, col)


def validate_move(raw: str, board: Board) -> Move:
    move = parse_move(raw)
    if board.get(move.row, move.col) is not Cell.EMPTY:
        raise InvalidMove(MoveError.CELL_OCCUPIED, raw)
    return move

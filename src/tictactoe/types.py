# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import NamedTuple


class Cell(str, Enum):
    """Content of one board square. The value is the glyph it renders as."""

    X = "X"
    O = "O"
    EMPTY = " "


class Outcome(Enum):
    X_WINS = "X wins"
    O_WINS = "O wins"
    DRAW = "draw"
    NO_WINNER_YET = "no winner yet"


class Phase(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAWN = "drawn"


class Move(NamedTuple):
    row: int  # 0..2
    col: int  # 0..2


WINS_BY_MARK = {
    Cell.X: Outcome.X_WINS,
    Cell.O: Outcome.O_WINS,
}

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.types import Cell, Phase


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Cell = Cell.X
    moves: int = 0
    phase: Phase = Phase.IN_PROGRESS
    winner: Optional[Cell] = None
    last_status: str = "Player X starts."

    @property
    def is_over(self) -> bool:
        return self.phase is not Phase.IN_PROGRESS


# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

from tictactoe.config import ROWS, COLS
from tictactoe.errors import InvariantViolation
from tictactoe.types import Cell, Move


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    rows = ROWS
    cols = COLS

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(COLS)] for _ in range(ROWS)]
            return
        # Boards built from an existing grid must still be exactly 3x3.
        if len(self.grid) != ROWS or any(len(row) != COLS for row in self.grid):
            raise InvariantViolation(f"Board must be {ROWS}x{COLS}.")
        if any(not isinstance(p, Cell) for row in self.grid for p in row):
            raise InvariantViolation("Board cells must be Cell values.")

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from glyph strings, e.g. ["XO ", " X ", "  O"].
        "_" and "." are accepted as blanks so test fixtures stay readable.
        """
        grid = []
        for line in rows:
            try:
                grid.append([Cell(" " if ch in "_." else ch.upper()) for ch in line])
            except ValueError as e:
                raise InvariantViolation(f"Unknown glyph in board row {line!r}.") from e
        return cls(grid)

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def get(self, row: int, col: int) -> Cell:
        self._check_coords(row, col)
        return self.grid[row][col]

    def place(self, row: int, col: int, mark: Cell) -> None:
        """
        The only mutation. Callers validate first; anything that slips through
        is a bug, so it raises InvariantViolation instead of a user error.
        """
        self._check_coords(row, col)
        if mark is Cell.EMPTY:
            raise InvariantViolation("Cannot place an empty mark.")
        if self.grid[row][col] is not Cell.EMPTY:
            raise InvariantViolation(f"Cell ({row}, {col}) is already occupied.")
        self.grid[row][col] = mark

    def empty_cells(self) -> List[Move]:
        return [
            Move(r, c)
            for r in range(ROWS)
            for c in range(COLS)
            if self.grid[r][c] is Cell.EMPTY
        ]

    def is_full(self) -> bool:
        return all(p is not Cell.EMPTY for row in self.grid for p in row)

    def _check_coords(self, row: int, col: int) -> None:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise InvariantViolation(f"Coordinates ({row}, {col}) are off the board.")

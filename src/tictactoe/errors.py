from __future__ import annotations
from enum import Enum


class MoveError(Enum):
    """Why a typed move was rejected. Values are the messages shown to the player."""

    MALFORMED_LENGTH = "The given input is not a two digit number representing the row and column!"
    ROW_NOT_DIGIT = "The given digit to row is not base 10."
    ROW_OUT_OF_RANGE = "Invalid value for row. Must be in range [1, 3]."
    COL_NOT_DIGIT = "The given digit to column is not base 10."
    COL_OUT_OF_RANGE = "Invalid value for column. Must be in range [1, 3]."
    CELL_OCCUPIED = "The chosen grid is already occupied!"

    @property
    def message(self) -> str:
        return self.value


class InvalidMove(ValueError):
    """Recoverable: the player typed something unusable and gets another go."""

    def __init__(self, kind: MoveError, raw: str = "") -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.raw = raw


class FatalGameError(RuntimeError):
    """Unrecoverable: the game cannot continue."""


class InvariantViolation(FatalGameError):
    """Internal logic error, e.g. a mark placed on an occupied cell."""


class InputUnavailable(FatalGameError):
    """The input stream closed or failed while waiting for a move."""

from __future__ import annotations
import logging

from tictactoe.config import MAX_MOVES
from tictactoe.core.rules import check_winner
from tictactoe.errors import InvariantViolation
from tictactoe.game.state import GameState
from tictactoe.game.validator import validate_move
from tictactoe.types import Cell, Move, Outcome, Phase

logger = logging.getLogger(__name__)


def other(player: Cell) -> Cell:
    if player is Cell.X:
        return Cell.O
    if player is Cell.O:
        return Cell.X
    raise InvariantViolation(f"Invalid turn value: {player!r}")


def apply_move(state: GameState, move: Move) -> Phase:
    """
    Place the current player's mark, advance the state machine, flip the turn.

    The move must already be validated against state.board.
    """
    if state.is_over:
        raise InvariantViolation("Game is over; no further moves accepted.")

    player = state.current
    nxt = other(player)  # fails before mutating if the turn is corrupt

    state.board.place(move.row, move.col, player)
    state.moves += 1
    logger.debug("Player %s -> (%d, %d), move %d", player.value, move.row, move.col, state.moves)

    outcome = check_winner(state.board)
    if outcome is not Outcome.NO_WINNER_YET:
        state.phase = Phase.WON
        state.winner = player
        logger.debug("Player %s completed a line", player.value)
    elif state.moves >= MAX_MOVES:
        state.phase = Phase.DRAWN
        logger.debug("Board full with no winner")

    state.current = nxt
    return state.phase


def play_turn(state: GameState, raw: str) -> Move:
    """
    Validate raw input and apply it. InvalidMove leaves state untouched.
    """
    move = validate_move(raw, state.board)
    player = state.current
    apply_move(state, move)
    state.last_status = f"Player {player.value} chose {raw.strip()}."
    return move

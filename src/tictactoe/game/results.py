from __future__ import annotations

from tictactoe.errors import InvariantViolation
from tictactoe.game.state import GameState
from tictactoe.types import Outcome, Phase, WINS_BY_MARK


def final_outcome(state: GameState) -> Outcome:
    if state.phase is Phase.WON:
        if state.winner not in WINS_BY_MARK:
            raise InvariantViolation(f"Game won without a winner mark: {state.winner!r}")
        return WINS_BY_MARK[state.winner]
    if state.phase is Phase.DRAWN:
        return Outcome.DRAW
    raise InvariantViolation("Game is still in progress.")


def outcome_message(outcome: Outcome) -> str:
    if outcome is Outcome.X_WINS:
        return "Player X wins!"
    if outcome is Outcome.O_WINS:
        return "Player O wins!"
    if outcome is Outcome.DRAW:
        return "Draw!"
    raise InvariantViolation(f"Not a final outcome: {outcome!r}")

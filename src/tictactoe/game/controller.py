
from __future__ import annotations
import logging
import sys
from typing import Callable, Optional, TextIO

from tictactoe.core.rules import check_winner_with_line
from tictactoe.errors import InvalidMove
from tictactoe.game.actions import play_turn
from tictactoe.game.results import final_outcome, outcome_message
from tictactoe.game.state import GameState
from tictactoe.types import Outcome
from tictactoe.ui.prompts import read_move, report_invalid
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)


def run_game(
    read_line: Callable[[], str] = input,
    out: Optional[TextIO] = None,
    err_out: Optional[TextIO] = None,
) -> Outcome:
    """
    Play one game to completion and return its final outcome.

    Rejected input is reported on err_out and the same player is asked again.
    FatalGameError (closed input, broken invariant) propagates to the caller.
    """
    if out is None:
        out = sys.stdout
    if err_out is None:
        err_out = sys.stderr

    state = GameState()
    render(state.board, status=state.last_status, out=out)

    while not state.is_over:
        raw = read_move(state.current, read_line, out)

        try:
            play_turn(state, raw)
        except InvalidMove as e:
            render(state.board, status=state.last_status, out=out)
            report_invalid(e, out, err_out)
            continue

        w = check_winner_with_line(state.board)
        render(
            state.board,
            status=state.last_status,
            highlight=w[1] if w else None,
            out=out,
        )

    outcome = final_outcome(state)
    logger.debug("Game finished after %d moves: %s", state.moves, outcome.name)
    print("\n" + outcome_message(outcome), file=out)
    return outcome

from __future__ import annotations
import logging
import sys
from typing import Callable, Optional, TextIO

from tictactoe.errors import InputUnavailable, InvalidMove
from tictactoe.types import Cell

logger = logging.getLogger(__name__)

HINT = "Input your move in 'rowcol' format (e.g. '11' or '33'):"


def read_move(
    player: Cell,
    read_line: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> str:
    if out is None:
        out = sys.stdout

    print("\n", file=out)
    print(f"Player {player.value} turn.", file=out)
    print(HINT, file=out)
    out.flush()

    try:
        return read_line()
    except (EOFError, OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(f"Error receiving input for player {player.value}.") from e


def report_invalid(
    err: InvalidMove,
    out: Optional[TextIO] = None,
    err_out: Optional[TextIO] = None,
) -> None:
    if out is None:
        out = sys.stdout
    if err_out is None:
        err_out = sys.stderr
    logger.info("Rejected move %r: %s", err.raw, err.kind.name)
    print("\n", file=out)
    out.flush()
    print(f"{err.kind.message} Try again!", file=err_out)

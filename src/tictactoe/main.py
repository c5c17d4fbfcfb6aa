from __future__ import annotations

import logging
import sys

from tictactoe import config
from tictactoe.errors import FatalGameError
from tictactoe.game.controller import run_game

logger = logging.getLogger("tictactoe")


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, stream=sys.stderr)

    try:
        run_game()
    except FatalGameError as e:
        logger.critical("Aborting: %s", e)
        print(f"\nFatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

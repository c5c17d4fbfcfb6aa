# src/tictactoe/config.py

from __future__ import annotations

ROWS = 3
COLS = 3
MAX_MOVES = ROWS * COLS

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Logging goes to stderr; keep it quiet so it never mixes with the board.
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

from __future__ import annotations
from tictactoe import config

RESET = "\033[0m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; used for the winning line

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"

from __future__ import annotations
import sys
from typing import Optional, Iterable, List, Tuple, Set, TextIO

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell
from tictactoe.ui.colors import c, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

Coord = Tuple[int, int]

CLEAR = "\033[2J\033[1;1H"  # clear screen, cursor to top-left
MARGIN = "   \t"
SEPARATOR = "  ══╬═══╬══"


def _piece(cell: Cell, highlighted: bool = False) -> str:
    # Exactly one printable glyph per cell; colour codes wrap it.
    if cell is Cell.EMPTY:
        glyph = cell.value
    elif cell is Cell.X:
        glyph = c(cell.value, FG_RED)
    else:
        glyph = c(cell.value, FG_YELLOW)
    if highlighted:
        glyph = c(glyph, REVERSE)
    return glyph


def clear_screen(out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    if config.CLEAR_SCREEN:
        print(CLEAR, file=out)


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [
        MARGIN + c("     COL", DIM),
        "",
        MARGIN + c("  1   2   3", DIM),
    ]
    for r in range(board.rows):
        cells = [_piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        label = "ROW\t" if r == 1 else MARGIN
        lines.append(f"{label}{r + 1} " + " ║ ".join(cells))
        if r < board.rows - 1:
            lines.append(MARGIN + SEPARATOR)
    return lines


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    out: Optional[TextIO] = None,
) -> None:
    if out is None:
        out = sys.stdout

    clear_screen(out)
    for line in board_lines(board, highlight):
        print(line, file=out)

    if status:
        print("\n" + c(status, FG_CYAN), file=out)

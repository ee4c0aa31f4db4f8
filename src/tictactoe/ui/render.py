from __future__ import annotations
from typing import Iterable, Optional, Set

from tictactoe.config import CLEAR_SCREEN, USE_COLOR
from tictactoe.core.board import DIVIDER, Board
from tictactoe.core.piece import Piece
from tictactoe.types import Coord
from tictactoe.ui.colors import c, BOLD, FG_RED, FG_YELLOW, REVERSE


def _piece(p: Piece) -> str:
    if p is Piece.X:
        return c("X", FG_RED)
    if p is Piece.O:
        return c("O", FG_YELLOW)
    return p.render()


def clear_screen(enabled: bool = CLEAR_SCREEN) -> str:
    return "\033[2J\033[H" if enabled else ""


def render_board(
    board: Board,
    highlight: Optional[Iterable[Coord]] = None,
    color: bool = USE_COLOR,
) -> str:
    """
    Same layout as Board.render(). With color on, pieces are tinted and
    the highlighted squares (a winning line) are shown in reverse video.
    """
    if not color:
        return board.render()

    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = []
    for r, row in enumerate(board.grid):
        parts = []
        for col, p in enumerate(row):
            s = _piece(p)
            if (r, col) in hl:
                s = c(s, REVERSE + BOLD)
            parts.append(s)
        lines.append(" " + " | ".join(parts))
    return f"\n{DIVIDER}\n".join(lines)

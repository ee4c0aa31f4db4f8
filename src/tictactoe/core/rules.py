from __future__ import annotations
from typing import List, Optional, Sequence

from tictactoe.config import SIZE
from tictactoe.core.piece import Piece
from tictactoe.core.results import Corner, Winner, WinResult
from tictactoe.types import Coord

Grid = Sequence[Sequence[Piece]]


def check_three(a: Piece, b: Piece, c: Piece) -> WinResult:
    if a == b == c and not a.is_empty:
        return WinResult.WIN
    return WinResult.NONE


def _check_line(grid: Grid, cells: List[Coord]) -> Winner:
    a, b, c = (grid[r][col] for r, col in cells)
    return Winner(piece=a, status=check_three(a, b, c), line=tuple(cells))


def check_row(grid: Grid, row: int) -> Winner:
    return _check_line(grid, [(row, c) for c in range(SIZE)])


def check_column(grid: Grid, col: int) -> Winner:
    return _check_line(grid, [(r, col) for r in range(SIZE)])


def check_diagonal(grid: Grid, corner: Corner) -> Winner:
    if corner is Corner.TOP_LEFT:
        return _check_line(grid, [(i, i) for i in range(SIZE)])
    return _check_line(grid, [(i, SIZE - 1 - i) for i in range(SIZE)])


def find_winner(grid: Grid) -> Optional[Winner]:
    """
    First completed line in scan order: rows, columns, then the
    top-left and top-right diagonals.
    """
    for r in range(SIZE):
        w = check_row(grid, r)
        if w.is_win:
            return w

    for c in range(SIZE):
        w = check_column(grid, c)
        if w.is_win:
            return w

    for corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT):
        w = check_diagonal(grid, corner)
        if w.is_win:
            return w

    return None

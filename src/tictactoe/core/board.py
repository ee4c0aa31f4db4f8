# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from tictactoe.config import CELLS, SIZE
from tictactoe.core.piece import Piece
from tictactoe.core.results import DRAW, Winner
from tictactoe.core.rules import find_winner
from tictactoe.errors import OccupiedCellError

DIVIDER = "-" * 11


@dataclass(slots=True)
class Board:
    grid: List[List[Piece]] = field(default_factory=list)
    moves: int = 0  # non-empty cells on the grid

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Piece.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
        # A board built from an existing grid gets its move count from the grid.
        self.moves = sum(1 for row in self.grid for p in row if not p.is_empty)

    def is_full(self) -> bool:
        return self.moves >= CELLS

    def place(self, row: int, col: int, piece: Piece) -> bool:
        """
        Put `piece` on an empty square. Returns False and leaves the
        board untouched if the square is taken.
        """
        self._check_bounds(row, col)
        if piece.is_empty:
            raise ValueError("Cannot place an empty piece.")
        if not self.grid[row][col].is_empty:
            return False
        self.grid[row][col] = piece
        self.moves += 1
        return True

    def place_or_raise(self, row: int, col: int, piece: Piece) -> None:
        if not self.place(row, col, piece):
            raise OccupiedCellError(row, col, self.grid[row][col])

    def evaluate(self) -> Optional[Winner]:
        """
        None while the game is still going, otherwise a Winner whose
        status is WIN or DRAW.
        """
        w = find_winner(self.grid)
        if w is not None:
            return w
        if self.is_full():
            return DRAW
        return None

    def render(self) -> str:
        lines = [" " + " | ".join(p.render() for p in row) for row in self.grid]
        return f"\n{DIVIDER}\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def _check_bounds(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Square ({row}, {col}) is off the board.")

from __future__ import annotations
from typing import TYPE_CHECKING

from tictactoe.config import MSG_INVALID, MSG_OCCUPIED

if TYPE_CHECKING:
    from tictactoe.core.piece import Piece


class MoveError(ValueError):
    """
    A move the player can correct by typing something else.
    `message` is what gets shown on the console.
    """
    message = MSG_INVALID


class ParseError(MoveError):
    def __init__(self, raw: str, reason: str = "not a number") -> None:
        super().__init__(f"Invalid move {raw!r}: {reason}.")
        self.raw = raw


class TranslationError(ParseError):
    def __init__(self, index: int) -> None:
        super().__init__(str(index), "no square for that index")
        self.index = index


class OccupiedCellError(MoveError):
    message = MSG_OCCUPIED

    def __init__(self, row: int, col: int, piece: Piece) -> None:
        super().__init__(f"Square ({row}, {col}) already holds {piece.render()}.")
        self.row = row
        self.col = col
        self.piece = piece

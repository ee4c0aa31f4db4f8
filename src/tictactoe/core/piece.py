from __future__ import annotations
from enum import Enum


class Piece(Enum):
    X = "X"
    O = "O"
    EMPTY = " "

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    def opposite(self) -> "Piece":
        """Turn swap. EMPTY has no opposite and comes back unchanged."""
        if self is Piece.X:
            return Piece.O
        if self is Piece.O:
            return Piece.X
        return Piece.EMPTY

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()

from __future__ import annotations

from .core.board import Board
from .core.piece import Piece
from .core.results import Winner, WinResult

__all__ = ["Board", "Piece", "Winner", "WinResult"]

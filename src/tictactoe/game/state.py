from __future__ import annotations
from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core.piece import Piece


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Piece = Piece.X

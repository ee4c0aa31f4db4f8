from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from tictactoe.core.piece import Piece
from tictactoe.types import Coord


class WinResult(Enum):
    WIN = "win"
    DRAW = "draw"
    NONE = "none"


class Corner(Enum):
    TOP_LEFT = "top_left"     # (0,0) -> (2,2)
    TOP_RIGHT = "top_right"   # (0,2) -> (2,0)


@dataclass(frozen=True, slots=True)
class Winner:
    """
    Result of checking a line or the whole board.
    For a draw `piece` is EMPTY and `line` is empty.
    """
    piece: Piece
    status: WinResult
    line: Tuple[Coord, ...] = ()

    @property
    def is_win(self) -> bool:
        return self.status is WinResult.WIN

    @property
    def is_draw(self) -> bool:
        return self.status is WinResult.DRAW


DRAW = Winner(Piece.EMPTY, WinResult.DRAW)

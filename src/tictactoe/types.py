# src/tictactoe/types.py

from __future__ import annotations
from typing import NewType, Tuple

Coord = Tuple[int, int]   # board squares are (row, col); keypad lookups give (col, row)
Index = NewType("Index", int)   # keypad index 1..9

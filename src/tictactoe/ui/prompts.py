from __future__ import annotations

from tictactoe.config import KEYPAD
from tictactoe.errors import ParseError, TranslationError
from tictactoe.types import Coord, Index


def index_to_coordinates(index: int) -> Coord:
    """Keypad index (1..9) -> (col, row)."""
    try:
        return KEYPAD[index]
    except KeyError:
        raise TranslationError(index) from None


def parse_index(raw: str) -> Index:
    s = raw.strip()
    digits = s[1:] if s.startswith("+") else s
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(raw)
    try:
        return Index(int(digits))
    except ValueError:
        # longer than the interpreter will convert
        raise ParseError(raw, "too long") from None


def parse_move(raw: str) -> Coord:
    """
    One line of console input -> (col, row).
    Raises ParseError (or its TranslationError subclass) on bad input.
    """
    return index_to_coordinates(parse_index(raw))

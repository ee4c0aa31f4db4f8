# src/tictactoe/config.py

from __future__ import annotations

SIZE = 3
CELLS = SIZE * SIZE

# Keypad index -> (col, row). Top row of the keypad is row 0 on the board.
KEYPAD = {
    7: (0, 0), 8: (1, 0), 9: (2, 0),
    4: (0, 1), 5: (1, 1), 6: (2, 1),
    1: (0, 2), 2: (1, 2), 3: (2, 2),
}

# Console text
PROMPT = "Input move for {piece}: "
MSG_INVALID = "Please enter a valid move (1 - 9)!"
MSG_OCCUPIED = "That square is already occupied!"
MSG_WIN = "Player {piece} won!"
MSG_DRAW = "It's a draw!"

# UI toggles
USE_COLOR = False
CLEAR_SCREEN = False

# Logging
LOG_NAME = "tictactoe"
DEFAULT_LOG_LEVEL = "WARNING"

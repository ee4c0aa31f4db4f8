from __future__ import annotations
import logging
from typing import Callable, Optional

from tictactoe.config import CLEAR_SCREEN, LOG_NAME, MSG_DRAW, MSG_WIN, PROMPT, USE_COLOR
from tictactoe.core.results import Winner
from tictactoe.errors import MoveError
from tictactoe.game.state import GameState
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import clear_screen, render_board

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

log = logging.getLogger(LOG_NAME)


def take_turn(state: GameState, input_fn: InputFn, output_fn: OutputFn) -> None:
    """
    Prompt the side to move until it names a free square, then place it.
    EOFError / KeyboardInterrupt from input_fn propagate.
    """
    while True:
        raw = input_fn(PROMPT.format(piece=state.current))
        try:
            col, row = parse_move(raw)
            state.board.place_or_raise(row, col, state.current)
        except MoveError as e:
            log.debug("Rejected %r for %s: %s", raw, state.current, e)
            output_fn(e.message)
            continue

        log.info("%s -> (%d, %d), move %d", state.current, row, col, state.board.moves)
        return


def run_game(
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
    color: bool = USE_COLOR,
    clear: bool = CLEAR_SCREEN,
) -> Winner:
    input_fn = input_fn or input
    output_fn = output_fn or print
    state = GameState()
    log.info("New game, %s to move.", state.current)

    while True:
        output_fn(clear_screen(clear) + render_board(state.board, color=color))
        take_turn(state, input_fn, output_fn)

        result = state.board.evaluate()
        if result is None:
            state.current = state.current.opposite()
            continue

        if result.is_win:
            output_fn(render_board(state.board, highlight=result.line, color=color))
            output_fn(MSG_WIN.format(piece=result.piece))
            log.info("%s wins on %s after %d moves.", result.piece, list(result.line), state.board.moves)
        else:
            output_fn(MSG_DRAW)
            log.info("Draw after %d moves.", state.board.moves)
        return result

from __future__ import annotations

import argparse

from tictactoe.config import CLEAR_SCREEN, DEFAULT_LOG_LEVEL, LOG_NAME, USE_COLOR
from tictactoe.game.controller import run_game
from tictactoe.utils.logger import get_logger


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe on the console. Squares are numbered like a keypad.")
    ap.add_argument("--log-level", type=str.upper, default=DEFAULT_LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (logs go to stderr)")
    ap.add_argument("--log-file", type=str, default=None, help="Also write the log to this file")
    ap.add_argument("--color", action=argparse.BooleanOptionalAction, default=USE_COLOR,
                    help="Tint pieces and highlight the winning line")
    ap.add_argument("--clear", action=argparse.BooleanOptionalAction, default=CLEAR_SCREEN,
                    help="Clear the terminal before each board")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    log = get_logger(LOG_NAME, log_file=args.log_file, log_to_console=True, level=args.log_level)

    try:
        run_game(color=args.color, clear=args.clear)
    except (EOFError, KeyboardInterrupt):
        print()
        log.warning("Input closed before the game ended.")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

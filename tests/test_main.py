import builtins
import logging

import pytest

from tictactoe.config import LOG_NAME
from tictactoe.core.board import Board
from tictactoe.core.piece import Piece
from tictactoe.main import build_argparser, main
from tictactoe.utils.logger import get_logger


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_argparser_defaults():
    args = build_argparser().parse_args([])
    assert args.log_level == "WARNING"
    assert args.log_file is None
    assert args.color is False
    assert args.clear is False


def test_argparser_flags():
    args = build_argparser().parse_args(["--log-level", "debug", "--log-file", "game.log", "--color", "--clear"])
    assert args.log_level == "DEBUG"
    assert args.log_file == "game.log"
    assert args.color is True
    assert args.clear is True


def test_argparser_rejects_unknown_level():
    with pytest.raises(SystemExit):
        build_argparser().parse_args(["--log-level", "loud"])


def test_main_win_exits_zero(monkeypatch, capsys):
    _feed(monkeypatch, ["7", "1", "8", "2", "9"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("Player X won!")


def _board_after_center_x() -> str:
    b = Board()
    b.place(1, 1, Piece.X)
    return str(b)


def test_main_eof_exits_one(monkeypatch, capsys):
    _feed(monkeypatch, ["5"])
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "won" not in captured.out
    # board, then the blank line printed when input closes
    assert captured.out.endswith(_board_after_center_x() + "\n\n")
    assert "Input closed" in captured.err


def test_main_ctrl_c_exits_one(monkeypatch, capsys):
    lines = iter(["5"])

    def fake_input(prompt=""):
        line = next(lines, None)
        if line is None:
            raise KeyboardInterrupt
        return line

    monkeypatch.setattr(builtins, "input", fake_input)
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out.endswith(_board_after_center_x() + "\n\n")
    assert "Input closed" in captured.err


def test_main_writes_log_file(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "game.log"
    _feed(monkeypatch, ["7", "5", "9", "8", "2", "6", "4", "1", "3"])
    assert main(["--log-level", "INFO", "--log-file", str(log_file)]) == 0
    logging.getLogger(LOG_NAME).handlers[0].flush()
    text = log_file.read_text()
    assert "New game" in text
    assert "Draw after 9 moves." in text


def test_main_debug_log_records_moves_and_rejections(monkeypatch, tmp_path):
    log_file = tmp_path / "game.log"
    _feed(monkeypatch, ["x", "7", "1", "8", "2", "9"])
    assert main(["--log-level", "DEBUG", "--log-file", str(log_file)]) == 0
    logging.getLogger(LOG_NAME).handlers[0].flush()
    text = log_file.read_text()
    assert "DEBUG - Rejected 'x' for X" in text
    assert "INFO - X -> (0, 0), move 1" in text
    assert "X wins on" in text


def test_get_logger_does_not_duplicate_handlers(tmp_path):
    first = get_logger(LOG_NAME, log_file=tmp_path / "a.log", log_to_console=True)
    n = len(first.handlers)
    second = get_logger(LOG_NAME, log_file=tmp_path / "a.log", log_to_console=True)
    assert first is second
    assert len(second.handlers) == n == 2


def test_get_logger_without_outputs_is_silent():
    logger = get_logger(LOG_NAME)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)

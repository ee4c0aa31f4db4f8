from __future__ import annotations

import logging
from typing import List

import pytest

from tictactoe.config import LOG_NAME
from tictactoe.core.board import Board


class ScriptedConsole:
    """Feeds canned lines to the game and records everything it prints."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.out: List[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, s: str) -> None:
        self.out.append(s)


@pytest.fixture
def console_factory():
    return ScriptedConsole


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger(LOG_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

import logging
import os
from pathlib import Path
from typing import Optional, Union

from tictactoe.config import DEFAULT_LOG_LEVEL, LOG_NAME

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def get_logger(
    log_name: str = LOG_NAME,
    log_file: Optional[Union[Path, str]] = None,
    log_to_console: bool = False,
    level: Union[int, str] = DEFAULT_LOG_LEVEL,
) -> logging.Logger:
    """
    Create and configure a logger
    :param log_name: The logger name
    :param log_file: Optional file to write the log to
    :param log_to_console: Whether to log to stderr
    :param level: Logging level name or number
    :return Configured logger
    """
    logger = logging.getLogger(log_name)
    logger.setLevel(level)

    # Avoid adding duplicate handlers if the logger is configured more than once
    if not logger.handlers:
        formatter = logging.Formatter(FORMAT)
        if log_file is not None:
            parent = os.path.dirname(os.fspath(log_file))
            if parent:
                os.makedirs(parent, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode='w')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if log_to_console:
            # stderr, so the game's own stdout output is untouched
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    return logger

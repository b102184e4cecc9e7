"""
Logging setup for the token-guard command line.

Library modules only call logging.getLogger(__name__); handlers are
installed here, once, by the CLI.
"""

import logging
import sys
from typing import Union


LOGGER_NAME = "token_guard"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[str, int] = logging.WARNING) -> logging.Logger:
    """
    Install a stderr handler on the package logger.

    Calling it again only updates the level.

    Args:
        level: Level name ('DEBUG', 'info', ...) or logging constant

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger

"""Log utilities."""

import logging
from rich.logging import RichHandler


def get_logger(name: str, level: int = logging.DEBUG) -> logging.Logger:
    """Retrieve logger with the provided name.

    The logger writes through its own Rich handler and does not propagate
    records to the root logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger

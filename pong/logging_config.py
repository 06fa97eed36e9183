"""Logging configuration for the Pong game."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.getenv("PONG_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PONG_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def setup_logging(level: Optional[str] = None, name: str = "pong") -> logging.Logger:
    """
    Set up logging for the game.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger to configure; child loggers inherit its handler

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)

    # One console handler, even if called again
    handler = next((h for h in logger.handlers if getattr(h, "_pong_console", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._pong_console = True
        logger.addHandler(handler)
    logger.propagate = False
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    return logger

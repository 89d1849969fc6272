"""Logging setup for the funcsurf command-line viewer."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``funcsurf`` logger.

    Args:
        level: logging level, e.g. ``logging.DEBUG``.
        log_file: optional path that receives a copy of every record.
    """
    logger = logging.getLogger("funcsurf")
    logger.setLevel(level)

    # repeated calls replace handlers instead of stacking them
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("logging initialized at level %s", logging.getLevelName(level))
    return logger

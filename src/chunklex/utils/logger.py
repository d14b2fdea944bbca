"""Minimal logging utilities for chunklex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from chunklex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "chunklex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'chunklex.mymodule'
    """
    if not (name == "chunklex" or name.startswith("chunklex.")):
        name = f"chunklex.{name}"
    return logging.getLogger(name)

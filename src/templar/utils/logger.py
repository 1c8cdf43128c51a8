"""Minimal logging utilities for Templar.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from templar.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenized %d chunks", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "templar." prefix.
    The library never attaches handlers; applications configure output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'templar.mymodule'
    """
    if not (name == "templar" or name.startswith("templar.")):
        name = f"templar.{name}"
    return logging.getLogger(name)

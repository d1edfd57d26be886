"""Minimal logging utilities for flagtext.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from flagtext.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing config text")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "flagtext." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'flagtext.mymodule'
    """
    if not (name == "flagtext" or name.startswith("flagtext.")):
        name = f"flagtext.{name}"
    return logging.getLogger(name)

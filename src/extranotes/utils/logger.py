"""Minimal logging utilities for extranotes.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from extranotes.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Linking references")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "extranotes." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'extranotes.mymodule'
    """
    # Ensure extranotes prefix for consistent namespacing
    if not (name == "extranotes" or name.startswith("extranotes.")):
        name = f"extranotes.{name}"
    return logging.getLogger(name)

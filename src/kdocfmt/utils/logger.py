"""Minimal logging utilities for kdocfmt.

Provides a simple get_logger function that wraps the standard library logging.
The package never installs handlers; hosts configure logging themselves.

Example:
    >>> from kdocfmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Formatting comment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "kdocfmt." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("writer")
        >>> logger.name
        'kdocfmt.writer'
    """
    if not (name == "kdocfmt" or name.startswith("kdocfmt.")):
        name = f"kdocfmt.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for memomark.

Example:
    >>> from memomark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning note")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``memomark.`` namespace.

    The library never installs handlers; applications configure logging.

    Example:
        >>> get_logger("scanner").name
        'memomark.scanner'
    """
    if not (name == "memomark" or name.startswith("memomark.")):
        name = f"memomark.{name}"
    return logging.getLogger(name)

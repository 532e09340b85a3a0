"""
Logging setup for the command line tool.

Library modules only do `logging.getLogger(__name__)`; the CLI calls
setup_logging() once to attach a rich handler to the package logger.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "daylayout"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure and return the package logger (INFO, or DEBUG if verbose).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Prevent duplicate handlers
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False, log_time_format="%H:%M:%S")
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger

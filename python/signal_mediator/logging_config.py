"""Logging configuration for the signal mediator."""

import logging
import os
import sys


def get_logger(name: str = "signal_mediator") -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses MEDIATOR_LOG_LEVEL (or LOG_LEVEL) to determine the log level.
    If not set, defaults to ERROR level, which effectively disables most package logging.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        level = os.getenv("MEDIATOR_LOG_LEVEL", os.getenv("LOG_LEVEL", "ERROR")).upper()

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Numeric levels ("10") are accepted as well as names ("DEBUG")
        logger.setLevel(int(level) if level.isdigit() else level)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()

"""Logging setup for the setalgebra command line."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "setalgebra"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.ERROR, log_file: str | None = None) -> None:
    """Configure the 'setalgebra' logger namespace.

    Console output goes to stderr; stdout carries script results only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Repeated calls (tests, embedding) must not stack handlers.
    teardown_logging()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")


def teardown_logging() -> None:
    """Close and detach every handler on the 'setalgebra' logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

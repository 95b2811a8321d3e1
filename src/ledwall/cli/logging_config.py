"""Logging configuration for the command line.

The library modules only create loggers; handlers are attached here, on
the ``ledwall`` namespace, when the CLI starts.
"""

import logging
import sys

LOGGER_NAME = "ledwall"


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> None:
    """Configure the ``ledwall`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also save logs to a file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when the app is invoked more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # stderr keeps stdout clean for json/svg output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))

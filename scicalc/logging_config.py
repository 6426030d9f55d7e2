"""Logging setup for the scicalc namespace."""

import logging
import sys
from pathlib import Path

from textual.logging import TextualHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int | str = logging.INFO, log_file: Path | None = None, tui: bool = False) -> None:
    """
    Configures the "scicalc" logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to.
        tui: Route console output through Textual instead of stderr, which
            would otherwise draw over the running terminal UI.
    """
    logger = logging.getLogger("scicalc")
    logger.setLevel(level)

    # Avoid duplicate handlers when called again (tests, repeated CLI runs)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler: logging.Handler = TextualHandler() if tui else logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")

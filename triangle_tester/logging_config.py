"""
Logging Configuration
Sets up the package logger for the application.
"""
import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configures the logger for the 'triangle_tester' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("triangle_tester")
    logger.setLevel(level)

    # Avoid duplicate handlers when uvicorn reloads the app
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.debug("Logging initialized.")

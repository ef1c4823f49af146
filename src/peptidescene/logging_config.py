"""
Logging Configuration
Sets up the package logger for applications embedding the translator.

The level passed by the caller can be overridden without code changes by
setting PEPTIDESCENE_LOG_LEVEL (a level name such as "DEBUG", or a number).
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "PEPTIDESCENE_LOG_LEVEL"


def resolve_level(level: int) -> int:
    """Return the level from PEPTIDESCENE_LOG_LEVEL if set, else `level`."""
    override = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not override:
        return level
    if override.isdigit():
        return int(override)

    levels = logging.getLevelNamesMapping()
    if override.upper() not in levels:
        raise ValueError(f"{LOG_LEVEL_ENV}='{override}' is not a logging level.")
    return levels[override.upper()]


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'peptidescene' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO),
            unless PEPTIDESCENE_LOG_LEVEL overrides it.
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)
    logger = logging.getLogger("peptidescene")
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")

"""
Logging Configuration
Sets up the package logger for the application.
"""
import logging
import sys
from typing import Optional, Union

from simplecalc.config import LOG_DATE_FORMAT, LOG_FORMAT


def level_from_name(name: Optional[str], default: int = logging.WARNING) -> int:
    """Translate a level name such as 'debug' into a logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return default


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'simplecalc' namespace.

    Args:
        level: Logging level, either a constant (logging.DEBUG) or a name ("debug").
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = level_from_name(level)

    logger = logging.getLogger("simplecalc")
    logger.setLevel(level)

    # Avoid duplicate records when called twice (tests, restarts)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger

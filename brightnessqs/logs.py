"""
Logging setup for applications using brightnessqs.

The library itself only ever logs through `logging.getLogger(__name__)`.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .exceptions import ConfigurationError

LOGGER_NAME = "brightnessqs"


def setup_logging(level: str = "WARNING",
                  log_file: Optional[str] = None,
                  max_bytes: int = 5 * 1024 * 1024,
                  backup_count: int = 5) -> logging.Logger:
    """
    Configure the package logger with a console handler and an optional rotating file handler.

    Handlers installed by a previous call are replaced.

    Args:
        level: Logging level name for the console, e.g. "INFO"
        log_file: Path of a rotating log file, or None for console only
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files to keep
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Invalid logging level '{level}'")

    handlers: list[logging.Handler] = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s.%(msecs)03d %(levelname)s: %(message)s', datefmt='%H:%M:%S'
    ))
    handlers.append(console_handler)

    # File handler
    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(fmt="%(asctime)s\t%(levelname)s\t%(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # Existing handlers are only replaced once the new ones are open
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    return logger

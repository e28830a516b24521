"""
Logging Configuration
=====================
Console (and optional file) logging for the `hopfviewer` namespace.

The level can be given as a number or a name ("DEBUG"), and the
HOPFVIEWER_LOG_LEVEL / HOPFVIEWER_LOG_FILE environment variables override the
defaults passed by the entry point, so picks and settings writes can be traced
without editing code.
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "hopfviewer"
ENV_LEVEL = "HOPFVIEWER_LOG_LEVEL"
ENV_FILE = "HOPFVIEWER_LOG_FILE"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level number or name into a logging level.

    Raises:
        ValueError: If the name is not a known level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the handlers instead of stacking them.

    Args:
        level: Level number or name; HOPFVIEWER_LOG_LEVEL wins if set.
        log_file: Optional path of a log file; HOPFVIEWER_LOG_FILE wins if set.

    Returns:
        The configured `hopfviewer` logger.
    """
    level = resolve_level(os.environ.get(ENV_LEVEL) or level)
    log_file = os.environ.get(ENV_FILE) or log_file

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
    return logger

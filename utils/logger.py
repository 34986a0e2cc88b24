"""
Logging configuration

stdout is reserved for the four-line analysis report, so every handler
here writes to stderr or to the log file.
"""
import logging
import os
import sys
from typing import Optional

from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    """Handler bound to stderr (never stdout)"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: str, formatter: logging.Formatter) -> Optional[logging.Handler]:
    """Handler for the log file, None when file logging is switched off"""
    if not log_file:
        return None
    os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str, level: str = None, log_file: str = None) -> logging.Logger:
    """
    Get logger instance with configured settings

    Calling it again for the same name returns the same logger without
    adding handlers twice.

    Args:
        name: Logger name (typically __name__)
        level: Log level name (defaults to settings.LOG_LEVEL)
        log_file: Log file path (defaults to settings.LOG_FILE, "" for console only)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level or settings.LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_console_handler(formatter))

    file_handler = _file_handler(settings.LOG_FILE if log_file is None else log_file, formatter)
    if file_handler:
        logger.addHandler(file_handler)

    return logger

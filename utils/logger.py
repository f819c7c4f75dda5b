# utils/logger.py
"""
Logging for the DMS toolkit.

Modules take their logger from get_logger(__name__). Nothing is written
until an application calls setup_logging, which sends the records of every
toolkit module to a rotating log file and echoes warnings to the console.
"""

import logging
import logging.handlers
from pathlib import Path
from constants import (
    APP_NAME,
    APP_VERSION,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_FILE_NAME,
    LOG_DIR_NAME,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT
)


_loggers = {}
_installed = []  # handlers added by the last setup_logging call


def default_log_dir() -> Path:
    """Directory used when setup_logging is given none: ~/.dmstoolkit/logs."""
    return Path.home() / LOG_DIR_NAME / "logs"


def setup_logging(log_dir=None, level: int = logging.INFO,
                  console_level: int = logging.WARNING) -> Path:
    """
    Route toolkit log records to a rotating file and the console.

    Calling it again replaces the handlers of the previous call; handlers
    installed by anyone else on the root logger are left in place.

    Args:
        log_dir: Directory for the log file, created if missing
        level: Level of the root logger and of the file handler
        console_level: Level of the console handler

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir) if log_dir is not None else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed.append(handler)
    root_logger.setLevel(level)

    root_logger.info(f"{APP_NAME} {APP_VERSION} writing log to {log_file}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """Logger for a toolkit module, usually called with __name__."""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]

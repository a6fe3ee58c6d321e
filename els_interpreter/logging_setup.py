"""Logging setup for the interpreter shell."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "els_interpreter"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def setup_logger(
    log_dir: Path,
    log_filename: str = "els.log",
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Create a logger with console + rotating file handlers.

    The console handler writes to stderr and only shows warnings and above by
    default, so command output on stdout stays clean; the file gets everything
    at ``level``.

    Args:
        log_dir: Directory for log files (created if not exists)
        log_filename: Log file name
        name: Logger name, the package logger by default
        level: Logging level for the logger and the file handler
        console_level: Logging level for the console handler
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        file_handler = RotatingFileHandler(
            log_dir / log_filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

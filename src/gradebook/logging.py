"""Centralized logging configuration for Gradebook.

Log records go to a rotating file so they never interleave with the menu
output; console logging is opt-in. When the log directory is unusable the
CLI drops to setup_console_logging() and keeps running.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "gradebook.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "gradebook"
ENV_LOG_DIR = "GRADEBOOK_LOG_DIR"
ENV_LOG_LEVEL = "GRADEBOOK_LOG_LEVEL"


def _resolve_level(level: str | None) -> tuple[str, int]:
    level = os.environ.get(ENV_LOG_LEVEL) or level or DEFAULT_LOG_LEVEL
    return level, getattr(logging, level.upper(), logging.INFO)


def _install(handlers: list[logging.Handler], log_level: int) -> logging.Logger:
    """Replace the gradebook logger's handlers with ``handlers``."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = False,
) -> logging.Logger:
    """Set up logging with a rotating file handler.

    Args:
        log_dir: Directory for log files. Defaults to 'logs' in current directory.
                 Can be overridden with GRADEBOOK_LOG_DIR environment variable.
        log_file: Log file name. Defaults to 'gradebook.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with GRADEBOOK_LOG_LEVEL environment variable.
        console: Whether to also log to stderr. Defaults to False.

    Returns:
        The root gradebook logger.

    Raises:
        OSError: If the log directory or file cannot be created. Existing
            handlers are left untouched in that case.
    """
    log_dir = Path(os.environ.get(ENV_LOG_DIR) or log_dir or DEFAULT_LOG_DIR)
    level, log_level = _resolve_level(level)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / log_file
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    logger = _install(handlers, log_level)
    logger.info("Gradebook logging initialized (level=%s, file=%s)", level, log_path)
    return logger


def setup_console_logging(level: str | None = None, console: bool = False) -> logging.Logger:
    """Configure logging without a log file.

    With ``console`` the records go to stderr; otherwise they are discarded
    so nothing leaks into the menu output.

    Returns:
        The root gradebook logger.
    """
    _, log_level = _resolve_level(level)
    handler = logging.StreamHandler() if console else logging.NullHandler()
    return _install([handler], log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'records.store', 'console').
              Will be prefixed with 'gradebook.'.

    Returns:
        Logger instance for the component.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

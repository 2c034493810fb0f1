"""Shared utilities for CLI commands."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from modmod.infrastructure.logging.log_paths import get_main_log_path

# Diagnostics go to stderr, command results to stdout
cli_console = Console(file=sys.stderr)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 3

# Handlers installed by the last setup_logging call
_handlers: list[logging.Handler] = []


def _level(name: str) -> int:
    return logging.getLevelName(name.upper())


def build_file_handler(log_file: Path, level: int) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def build_console_handler(level: int) -> RichHandler:
    handler = RichHandler(console=cli_console, rich_tracebacks=True, show_path=False)
    handler.setLevel(level)
    return handler


def setup_logging(
    log_level_name: str,
    console_logging: bool = False,
    file_log_level_name: str = "DEBUG",
    log_file: Path | None = None,
) -> Path:
    """Route modmod's log records to a rotating log file and, optionally, the console.

    Handlers from an earlier call are removed first, so calling it again
    reconfigures logging instead of duplicating output.

    Args:
        log_level_name: Level of the ``modmod`` logger and of the console handler
        console_logging: Also log to stderr via Rich
        file_log_level_name: Minimum level written to the log file
        log_file: Log file to use instead of the platform default

    Returns:
        The log file in use
    """
    log_file = log_file or get_main_log_path()

    root_logger = logging.getLogger()
    for handler in _handlers:
        handler.close()
        root_logger.removeHandler(handler)
    _handlers.clear()

    _handlers.append(build_file_handler(log_file, _level(file_log_level_name)))
    if console_logging:
        _handlers.append(build_console_handler(_level(log_level_name)))
    for handler in _handlers:
        root_logger.addHandler(handler)

    # Handlers do the filtering
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("modmod").setLevel(_level(log_level_name))
    return log_file

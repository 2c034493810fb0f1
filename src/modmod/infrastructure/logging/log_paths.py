"""Centralized log path management for modmod."""

from pathlib import Path

import platformdirs


def get_log_dir() -> Path:
    """Get the system-appropriate log directory for modmod.

    Returns:
        Path to the log directory (created if it doesn't exist)
        - Windows: %LOCALAPPDATA%/modmod/Logs
        - macOS: ~/Library/Logs/modmod
        - Linux: ~/.local/state/modmod/log
    """
    log_dir = Path(platformdirs.user_log_dir("modmod", appauthor=False))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_main_log_path() -> Path:
    return get_log_dir() / "modmod.log"

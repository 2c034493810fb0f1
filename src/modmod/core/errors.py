"""Errors raised while assembling a track.

Every failure aborts the build; callers only need to catch ``ModmodError``.
"""

from pathlib import Path


class ModmodError(Exception):
    """Base class for all errors raised by modmod."""

    pass


class LoadError(ModmodError):
    """A config file could not be read, parsed or validated.

    Attributes:
        path: The file that failed to load
        reason: Human-readable description of the failure
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


class OutputNotEmptyError(ModmodError):
    """The output directory has entries and clearing was not requested."""

    def __init__(self, path: Path):
        super().__init__(
            f"Output directory {path} is not empty (use --clear-output to replace it)"
        )
        self.path = path


class OutputError(ModmodError):
    """A filesystem operation on the input or output tree failed.

    Attributes:
        path: The path the operation was working on
        os_error: The underlying ``OSError``
    """

    def __init__(self, path: Path, os_error: OSError):
        message = os_error.strerror or str(os_error)
        super().__init__(f"Filesystem error for {path}: {message}")
        self.path = path
        self.os_error = os_error


class GlobPatternError(ModmodError):
    """An exercise include pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid include pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UnsupportedOperationError(ModmodError):
    """The requested feature exists in the config format but is not implemented."""

    def __init__(self, operation: str):
        super().__init__(f"Not yet supported: {operation}")
        self.operation = operation

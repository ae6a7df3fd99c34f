"""Custom exceptions for maid."""

from pathlib import Path


class MaidError(Exception):
    """Base exception for all maid errors."""

    pass


class UnreadableFileError(MaidError):
    """Raised when a candidate file cannot be opened, read or decoded."""

    def __init__(self, path: Path, reason: str):
        """
        Initialize unreadable file error.

        Args:
            path: File that could not be loaded
            reason: Underlying failure description
        """
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidDirectoryError(MaidError):
    """Raised when the directory to process is missing or not a directory."""

    pass


class HoldingAreaError(MaidError):
    """Raised when a discarded file cannot be moved into the holding area."""

    def __init__(self, message: str, moved: list = None):
        super().__init__(message)
        self.moved = moved or []

"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file system errors."""

    pass


class PathError(FileRepositoryError):
    """File system error tied to a specific path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(PathError):
    """Exception raised when a snapshot root or a target file does not exist."""

    pass


class UnreadableError(PathError):
    """Exception raised when a directory cannot be opened for reading."""

    pass


class IsDirectoryError(PathError):
    """Exception raised when a file operation targets a directory."""

    pass


class ReadOnlyFileError(PathError):
    """Exception raised when a deletion target is not writable."""

    pass


class ReadOnlyError(BaseAppError):
    """Exception raised on direct assignment to a snapshot's entries."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass

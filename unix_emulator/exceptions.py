"""
Custom exceptions for the application.
"""

from enum import Enum
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FsErrorKind(Enum):
    """Typed outcome of a failed filesystem primitive."""

    NOT_FOUND = "No such file or directory"
    ALREADY_EXISTS = "File exists"
    NOT_EMPTY = "Directory not empty"
    NOT_A_DIRECTORY = "Not a directory"
    IS_A_DIRECTORY = "Is a directory"
    PERMISSION_DENIED = "Permission denied"
    OTHER = "Filesystem error"


class FileSystemError(BaseAppError):
    """Exception raised when a filesystem primitive fails."""

    def __init__(
        self,
        kind: FsErrorKind,
        path: str = "",
        message: Optional[str] = None,
    ):
        self.kind = kind
        self.path = path
        self.message = message or kind.value
        super().__init__(f"{self.message}: {path}" if path else self.message)


class CommandUsageError(BaseAppError):
    """Exception raised when a command is invoked with missing operands."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass

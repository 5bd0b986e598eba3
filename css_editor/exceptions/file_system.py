"""File system exceptions."""
from typing import List, Optional

from css_editor.exceptions.base import CssEditorError


class FileSystemError(CssEditorError):
    """Base exception for file system failures."""

    pass


class InvalidStreamWrapperError(FileSystemError):
    """Raised when a URI uses a scheme with no registered root directory."""

    def __init__(self, uri: str, schemes: Optional[List[str]] = None):
        available_text = ""
        if schemes:
            available_text = f" Registered schemes: {', '.join(schemes)}."
        super().__init__(
            message=f"No stream wrapper registered for '{uri}'.{available_text}",
            code="INVALID_STREAM_WRAPPER",
            details={"uri": uri},
        )
        self.uri = uri


class FileWriteError(FileSystemError):
    """Raised when data cannot be written to its destination."""

    def __init__(self, destination: str, reason: str):
        super().__init__(
            message=f"Failed to write '{destination}': {reason}",
            code="FILE_WRITE_FAILED",
            details={"destination": destination},
        )
        self.destination = destination


class FileExistsConflictError(FileSystemError):
    """Raised when a destination exists and the write policy forbids replacing it."""

    def __init__(self, destination: str):
        super().__init__(
            message=f"File '{destination}' already exists",
            code="FILE_EXISTS",
            details={"destination": destination},
        )
        self.destination = destination


class PermissionChangeError(FileSystemError):
    """Raised when permissions cannot be applied to a file or directory."""

    def __init__(self, uri: str, mode: int, reason: str):
        super().__init__(
            message=f"Failed to chmod '{uri}' to {oct(mode)}: {reason}",
            code="CHMOD_FAILED",
            details={"uri": uri, "mode": oct(mode)},
        )
        self.uri = uri
        self.mode = mode

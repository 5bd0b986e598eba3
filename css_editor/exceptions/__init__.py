"""Custom exceptions for the config store, file system and generation pipeline.

Exceptions carry a message, a short code and a details dict so callers can
log them with structured context.
"""

from css_editor.exceptions.base import (
    CssEditorError,
    ValidationError,
    ConfigurationError,
)
from css_editor.exceptions.config_store import (
    ConfigStoreError,
    InvalidConfigNameError,
    ConfigSaveError,
)
from css_editor.exceptions.file_system import (
    FileSystemError,
    InvalidStreamWrapperError,
    FileWriteError,
    FileExistsConflictError,
    PermissionChangeError,
)

__all__ = [
    # Base exceptions
    "CssEditorError",
    "ValidationError",
    "ConfigurationError",
    # Config store
    "ConfigStoreError",
    "InvalidConfigNameError",
    "ConfigSaveError",
    # File system
    "FileSystemError",
    "InvalidStreamWrapperError",
    "FileWriteError",
    "FileExistsConflictError",
    "PermissionChangeError",
]

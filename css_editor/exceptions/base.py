"""Base exception classes for css-editor.

Every error carries a human readable message plus an optional machine
readable code and a details dict for structured logging.
"""

from typing import Any, Dict, Optional


class CssEditorError(Exception):
    """Base exception for all css-editor errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(CssEditorError):
    """Raised when input fails validation."""

    pass


class ConfigurationError(CssEditorError):
    """Raised when runtime configuration is missing or invalid."""

    pass


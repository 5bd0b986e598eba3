"""Config store exceptions."""
from typing import Optional

from css_editor.exceptions.base import CssEditorError, ValidationError


class ConfigStoreError(CssEditorError):
    """Base exception for config store failures."""

    pass


class InvalidConfigNameError(ValidationError):
    """Raised when a config name cannot be mapped to a record."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            message=f"Invalid config name '{name}': {reason}",
            code="INVALID_CONFIG_NAME",
            details={"name": name},
        )
        self.name = name


class ConfigSaveError(ConfigStoreError):
    """Raised when an editable config record cannot be committed."""

    def __init__(self, name: str, reason: Optional[str] = None):
        message = f"Failed to save config '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, code="CONFIG_SAVE_FAILED", details={"name": name})
        self.name = name

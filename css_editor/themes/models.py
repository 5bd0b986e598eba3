"""Theme CSS models and generation results."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from css_editor.config_store import ConfigRecord


class ThemeCssConfig(BaseModel):
    """Fields of a ``css_editor.theme.<theme>`` config record."""

    model_config = ConfigDict(extra="ignore")

    enabled: bool = False
    css: str = ""
    path: str = ""  # Written back by ThemeCssWriter only

    @field_validator("enabled", "css", "path", mode="before")
    @classmethod
    def _missing_as_default(cls, value: Any, info) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def from_record(cls, record: ConfigRecord) -> "ThemeCssConfig":
        return cls.model_validate(record.as_dict())


class GenerationStatus(str, Enum):
    """Outcome of a single theme generation."""

    GENERATED = "generated"
    DISABLED = "disabled"
    EMPTY_CSS = "empty_css"
    INVALID_CONFIG = "invalid_config"
    DIRECTORY_ERROR = "directory_error"
    WRITE_ERROR = "write_error"
    PERMISSION_ERROR = "permission_error"
    SAVE_ERROR = "save_error"


class GenerationResult(BaseModel):
    """Tagged result of ThemeCssWriter.generate_result()."""

    theme: str
    status: GenerationStatus
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is GenerationStatus.GENERATED

    @property
    def skipped(self) -> bool:
        return self.status in (GenerationStatus.DISABLED, GenerationStatus.EMPTY_CSS)


class RegenerationReport(BaseModel):
    """Per-theme results of a batch regeneration."""

    results: Dict[str, GenerationResult] = {}

    @property
    def generated_count(self) -> int:
        return sum(1 for result in self.results.values() if result.success)

    @property
    def failed(self) -> Dict[str, GenerationResult]:
        return {
            theme: result
            for theme, result in self.results.items()
            if not result.success and not result.skipped
        }

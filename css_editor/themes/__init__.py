"""Theme stylesheet generation package."""
from css_editor.themes.models import (
    GenerationResult,
    GenerationStatus,
    RegenerationReport,
    ThemeCssConfig,
)
from css_editor.themes.regenerator import BatchRegenerator
from css_editor.themes.writer import ThemeCssWriter

__all__ = [
    "ThemeCssConfig",
    "GenerationStatus",
    "GenerationResult",
    "RegenerationReport",
    "ThemeCssWriter",
    "BatchRegenerator",
]

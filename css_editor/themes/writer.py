"""Per-theme stylesheet generation from config records."""

import os
from typing import Optional

from pydantic import ValidationError as ModelValidationError

from css_editor.config_store import ConfigStoreBase
from css_editor.file_system import DirectoryOptions, FileExists, FileSystemBase
from css_editor.logger import Logger, session_logger
from css_editor.themes.models import GenerationResult, GenerationStatus, ThemeCssConfig


class ThemeCssWriter:
    """Writes a theme's configured CSS to ``public://css_editor/<theme>.css``.

    The written location is saved back into the theme's config record as
    ``path``. All failures are absorbed: callers get a boolean from
    generate() or a tagged GenerationResult from generate_result(), and the
    reason for a failure is logged.
    """

    CONFIG_PREFIX = "css_editor.theme."
    DIRECTORY = "public://css_editor"

    def __init__(
        self,
        config_store: ConfigStoreBase,
        file_system: FileSystemBase,
        logger: Optional[Logger] = None,
    ):
        self.config_store = config_store
        self.file_system = file_system
        self.logger: Logger = logger or session_logger

    def config_name(self, theme: str) -> str:
        return self.CONFIG_PREFIX + theme

    def file_uri(self, theme: str) -> str:
        return self.DIRECTORY + os.sep + theme + ".css"

    def generate(self, theme: str) -> bool:
        """
        Generate the CSS file for a theme

        Args:
            theme: Machine name of the theme

        Returns:
            True if the file was written and its path saved, False otherwise
        """
        return self.generate_result(theme).success

    def generate_result(self, theme: str) -> GenerationResult:
        """Generate the CSS file for a theme and report how it went"""
        name = self.config_name(theme)
        record = self.config_store.get(name)

        try:
            settings = ThemeCssConfig.from_record(record)
        except ModelValidationError as e:
            self.logger.error("Invalid CSS editor config", theme=theme, config=name, error=str(e))
            return GenerationResult(theme=theme, status=GenerationStatus.INVALID_CONFIG, error=str(e))

        # Disabled themes and empty stylesheets are silent no-ops
        if not settings.enabled:
            return GenerationResult(theme=theme, status=GenerationStatus.DISABLED)
        # only absent, None or "" count as empty; "0" is still written
        if not settings.css:
            return GenerationResult(theme=theme, status=GenerationStatus.EMPTY_CSS)

        directory = self.DIRECTORY
        file_uri = self.file_uri(theme)

        try:
            prepared = self.file_system.prepare_directory(
                directory, DirectoryOptions.CREATE_DIRECTORY | DirectoryOptions.MODIFY_PERMISSIONS
            )
        except Exception as e:
            self.logger.error("Failed to create directory for CSS editor", path=directory, error=str(e))
            return GenerationResult(theme=theme, status=GenerationStatus.DIRECTORY_ERROR, error=str(e))

        if not prepared:
            self.logger.error("Failed to create directory for CSS editor", path=directory)
            return GenerationResult(theme=theme, status=GenerationStatus.DIRECTORY_ERROR)

        stage = GenerationStatus.WRITE_ERROR
        try:
            self.file_system.save_data(settings.css, file_uri, FileExists.REPLACE)

            stage = GenerationStatus.PERMISSION_ERROR
            self.file_system.chmod(file_uri)

            # path is recorded only once the file is in place
            stage = GenerationStatus.SAVE_ERROR
            self.config_store.get_editable(name).set("path", file_uri).save()
        except Exception as e:
            self.logger.error("Failed to save CSS file for theme", theme=theme, error=str(e))
            return GenerationResult(theme=theme, status=stage, error=str(e))

        self.logger.info("CSS file generated", theme=theme, path=file_uri)
        return GenerationResult(theme=theme, status=GenerationStatus.GENERATED, path=file_uri)

"""Batch regeneration of every configured theme stylesheet."""

from typing import List, Optional

from css_editor.config_store import ConfigStoreBase
from css_editor.logger import Logger, session_logger
from css_editor.themes.models import RegenerationReport
from css_editor.themes.writer import ThemeCssWriter


class BatchRegenerator:
    """Runs ThemeCssWriter once for every ``css_editor.theme.*`` record"""

    def __init__(
        self,
        writer: ThemeCssWriter,
        config_store: Optional[ConfigStoreBase] = None,
        logger: Optional[Logger] = None,
    ):
        self.writer = writer
        self.config_store = config_store or writer.config_store
        self.logger: Logger = logger or session_logger

    def list_themes(self) -> List[str]:
        """Theme names in the order the store lists their records"""
        prefix = self.writer.CONFIG_PREFIX
        return [name[len(prefix):] for name in self.config_store.list_all(prefix)]

    def run(self) -> RegenerationReport:
        """
        Regenerate every theme and collect per-theme results

        A failing theme never stops the batch; each generation absorbs its
        own errors.
        """
        report = RegenerationReport()
        for theme in self.list_themes():
            report.results[theme] = self.writer.generate_result(theme)

        self.logger.info(
            "CSS regeneration completed",
            themes=len(report.results),
            generated=report.generated_count,
            failed=len(report.failed),
        )
        return report

    def regenerate_all(self) -> int:
        """
        Regenerate CSS files for all themes with custom CSS

        Returns:
            The number of CSS files successfully regenerated
        """
        themes = self.list_themes()
        count = 0
        for theme in themes:
            if self.writer.generate(theme):
                count += 1

        self.logger.info("CSS regeneration completed", themes=len(themes), generated=count)
        return count

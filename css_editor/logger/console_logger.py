"""Console logger writing to stdout."""

import logging
import sys
from typing import Optional

from .default_logger import DefaultLogger

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with a stdout handler attached"""

    def __init__(self, name: str = "css_editor", level: Optional[int] = logging.INFO):
        super().__init__(name=name, level=level)
        # Loggers are process-wide; attach the handler only once per name
        if not any(getattr(h, "_css_editor_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            handler._css_editor_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
            self._logger.propagate = False

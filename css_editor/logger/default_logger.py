"""Default logger backed by the standard library logging module."""

import logging
from typing import Any, Dict, Optional

from .base import Logger


class DefaultLogger(Logger):
    """Logger that forwards to a stdlib ``logging.Logger``.

    Structured keyword context is rendered as ``key=value`` pairs after the
    message so log lines stay greppable.
    """

    def __init__(self, name: str = "css_editor", level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    @staticmethod
    def _format(message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} | {pairs}"

    def debug(self, message: str, **kwargs) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self._logger.error(self._format(message, kwargs))

    def critical(self, message: str, **kwargs) -> None:
        self._logger.critical(self._format(message, kwargs))

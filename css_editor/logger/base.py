"""Abstract logger interface.

Every method takes a human readable message plus structured context passed
as keyword arguments, e.g. ``logger.error("Write failed", theme="basic")``.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Structured logger interface used throughout css-editor"""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs) -> None:
        pass

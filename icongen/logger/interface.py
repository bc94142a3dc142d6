"""Abstract logger interface.

Implementations accept a human-readable message plus arbitrary keyword
arguments carrying structured context (session ids, tool names, paths).
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Drop-in logging interface used across icongen."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        ...

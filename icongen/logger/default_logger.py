"""Default logger backed by the standard logging module."""

import logging
from typing import Any, Dict, Optional

from icongen.logger.interface import Logger


def format_context(kwargs: Dict[str, Any]) -> str:
    """Render structured context as ``key=value`` pairs in insertion order."""
    if not kwargs:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in kwargs.items())


class DefaultLogger(Logger):
    """Logger that forwards to a named ``logging.Logger``.

    Handlers are left to the host application; nothing is attached here.
    """

    def __init__(self, name: str = "icongen", level: Optional[int] = None) -> None:
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, kwargs: Dict[str, Any]) -> None:
        self._logger.log(level, f"{message}{format_context(kwargs)}")

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

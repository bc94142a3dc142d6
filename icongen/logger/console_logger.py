"""Console logger writing timestamped lines to stderr.

stdout is reserved for the stdio MCP transport, so nothing is ever logged
there.
"""

import logging
import sys

from icongen.logger.default_logger import DefaultLogger

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with a stderr stream handler attached once."""

    def __init__(self, name: str = "icongen", level: int = logging.INFO) -> None:
        super().__init__(name=name, level=level)
        if not any(getattr(h, "_icongen_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            handler._icongen_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False

"""
Logger module for icongen

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from icongen.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Application started", transport="stdio")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from icongen.config import Config
from icongen.logger.console_logger import ConsoleLogger
from icongen.logger.default_logger import DefaultLogger
from icongen.logger.interface import Logger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(
    level=getattr(logging, Config.get_log_level(), logging.INFO)
)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]

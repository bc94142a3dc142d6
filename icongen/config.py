"""Centralized configuration for the icongen MCP service.

ENVIRONMENT VARIABLES REFERENCE
-------------------------------
ICONGEN_OUTPUT_DIR: Default directory for saved icons (default: current working directory)
ICONGEN_STYLES_DIR: Directory of few-shot style definitions (default: bundled content/styles)
ICONGEN_MULTIMODAL: Force multimodal capability on or off ("true"/"false").
    Unset means the capability is sniffed from the environment.
ICONGEN_RETAIN_SESSIONS: Keep finished sessions in memory for diagnostics (default: false)
ICONGEN_LOG_LEVEL: Logging verbosity (default: INFO)
    Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
ICONGEN_MCP_HOST: Bind address for the HTTP transport (default: 127.0.0.1)
ICONGEN_MCP_PORT: Port for the HTTP transport (default: 8030)
"""

import os
from pathlib import Path
from typing import Optional

ENV_PREFIX = "ICONGEN"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MCP_HOST = "127.0.0.1"
DEFAULT_MCP_PORT = 8030

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env(name: str) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}_{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish string; returns None when unset or unrecognised."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


class Config:
    """Static accessors over ICONGEN_* environment variables."""

    @staticmethod
    def get_package_dir() -> Path:
        return Path(__file__).parent

    @staticmethod
    def get_output_dir() -> Path:
        override = _env("OUTPUT_DIR")
        return Path(override) if override else Path.cwd()

    @staticmethod
    def get_styles_dir() -> Path:
        override = _env("STYLES_DIR")
        if override:
            return Path(override)
        return Config.get_package_dir() / "content" / "styles"

    @staticmethod
    def get_multimodal_override() -> Optional[bool]:
        return parse_bool(_env("MULTIMODAL"))

    @staticmethod
    def retain_sessions() -> bool:
        return parse_bool(_env("RETAIN_SESSIONS")) is True

    @staticmethod
    def get_log_level() -> str:
        level = (_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return DEFAULT_LOG_LEVEL
        return level

    @staticmethod
    def get_mcp_host() -> str:
        return _env("MCP_HOST") or DEFAULT_MCP_HOST

    @staticmethod
    def get_mcp_port() -> int:
        value = _env("MCP_PORT")
        try:
            return int(value) if value else DEFAULT_MCP_PORT
        except ValueError:
            return DEFAULT_MCP_PORT


"""Base exception classes for the icongen application.

Every domain error carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` mapping, so the MCP layer can turn
it into a uniform failure payload without inspecting the exception type.
"""

from typing import Any, Dict, Optional


class IconGenError(Exception):
    """Root of the icongen exception hierarchy."""

    def __init__(
        self,
        code: str = "ICONGEN_ERROR",
        message: str = "",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(IconGenError):
    """Input failed validation."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(code=code, message=message, details=details)


class ResourceNotFoundError(IconGenError):
    """A requested resource does not exist."""


class ConfigurationError(IconGenError):
    """Service configuration is invalid or incomplete."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


__all__ = [
    "IconGenError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
]

"""Custom exceptions for the icon prompt pipeline and icon persistence.

All exceptions include detailed error messages designed for LLM processing,
so a calling model can correct its request and retry.
"""

from icongen.exceptions.base import (
    ConfigurationError,
    IconGenError,
    ResourceNotFoundError,
    ValidationError,
)
from icongen.exceptions.session import (
    ContextBuildError,
    PhaseValidationError,
    SessionNotFoundError,
    ShapeValidationError,
)
from icongen.exceptions.storage import ResponseParseError, SaveError

__all__ = [
    # Base exceptions
    "IconGenError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # Specific exceptions
    "ShapeValidationError",
    "PhaseValidationError",
    "ContextBuildError",
    "SessionNotFoundError",
    "SaveError",
    "ResponseParseError",
]

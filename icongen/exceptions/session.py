"""Session and pipeline exceptions."""

from typing import Any, Dict, Optional

from icongen.exceptions.base import IconGenError, ResourceNotFoundError, ValidationError


class ShapeValidationError(ValidationError):
    """Raised when a tool request is malformed, before any session exists."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="SHAPE_VALIDATION_FAILED", details=details)


class PhaseValidationError(ValidationError):
    """Raised when the validation phase rejects a session's request."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="PHASE_VALIDATION_FAILED", details=details)


class ContextBuildError(IconGenError):
    """Raised when reading references or composing the prompt fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONTEXT_BUILD_FAILED", message=message, details=details)


class SessionNotFoundError(ResourceNotFoundError):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="SESSION_NOT_FOUND",
            message=f"Session '{session_id}' not found",
            details=details or {},
        )
        self.session_id = session_id

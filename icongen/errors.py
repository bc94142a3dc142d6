"""Map domain exceptions onto the uniform MCP failure payload."""

from typing import Any, Dict

from icongen.exceptions import IconGenError

FAILURE_TYPE = "validation_failed"

# Short, caller-facing summaries per error code. The exception message goes
# into the ``error`` field untouched.
ERROR_SUMMARIES: Dict[str, str] = {
    "SHAPE_VALIDATION_FAILED": "Request validation failed",
    "PHASE_VALIDATION_FAILED": "Input validation failed",
    "CONTEXT_BUILD_FAILED": "Failed to build generation context",
    "SAVE_FAILED": "Failed to save icon",
    "RESPONSE_PARSE_FAILED": "Failed to parse LLM response",
    "SESSION_NOT_FOUND": "Session not found",
    "CONFIGURATION_ERROR": "Service misconfigured",
    "UNKNOWN_TOOL": "Tool not found",
}


def failure_payload(code: str, error: str, message: str = "") -> Dict[str, Any]:
    """Build the failure dict shared by every tool."""
    return {
        "type": FAILURE_TYPE,
        "success": False,
        "message": message or ERROR_SUMMARIES.get(code, "Operation failed"),
        "error": error,
        "error_code": code,
    }


def map_error_for_mcp(exc: IconGenError, message: str = "") -> Dict[str, Any]:
    """Convert a structured domain exception into the failure payload.

    Args:
        exc: Domain exception raised inside the service
        message: Optional summary overriding the per-code default

    Returns:
        Failure dict with ``type``, ``success``, ``message``, ``error`` and
        ``error_code`` keys, plus ``details`` when the exception carries any
    """
    payload = failure_payload(exc.code, exc.message or str(exc), message)
    if exc.details:
        payload["details"] = exc.details
    return payload

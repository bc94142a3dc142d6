"""Icon persistence and LLM response exceptions."""

from typing import Any, Dict, Optional

from icongen.exceptions.base import IconGenError


class SaveError(IconGenError):
    """Raised when an icon cannot be written to disk."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="SAVE_FAILED", message=message, details=details)


class ResponseParseError(IconGenError):
    """Raised when an LLM response does not follow the FILENAME/SVG contract."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="RESPONSE_PARSE_FAILED", message=message, details=details)

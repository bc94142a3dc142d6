"""MCP server response helpers.

Every tool answers with a single JSON ``TextContent`` block.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from mcp.types import TextContent

from icongen.mcp_server.tool_types import ToolResponse


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    if isinstance(obj, Path):
        return str(obj)
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)


def _json_text(payload: Dict[str, Any]) -> TextContent:
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=True, default=_json_serializer),
    )


def _respond(payload: Dict[str, Any]) -> ToolResponse:
    return [_json_text(payload)]

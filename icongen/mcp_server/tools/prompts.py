"""Prompt creation tool handler."""

from __future__ import annotations

from typing import Any, Dict

from icongen.mcp_server.responses import _respond
from icongen.mcp_server.state import ensure_facade
from icongen.mcp_server.tool_types import ToolResponse


async def _tool_create_icon_prompt(arguments: Dict[str, Any]) -> ToolResponse:
    return _respond(ensure_facade().create_prompt(arguments))

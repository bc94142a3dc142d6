"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict, Optional

from icongen.errors import failure_payload, map_error_for_mcp
from icongen.exceptions import IconGenError
from icongen.logger import Logger
from icongen.mcp_server.facade import (
    CREATE_ICON_PROMPT,
    SAVE_GENERATED_ICON,
    unknown_tool_payload,
)
from icongen.mcp_server.responses import _respond
from icongen.mcp_server.tool_types import ToolHandler, ToolResponse
from icongen.mcp_server.tools.icons import _tool_save_generated_icon
from icongen.mcp_server.tools.prompts import _tool_create_icon_prompt

HANDLERS: Dict[str, ToolHandler] = {
    CREATE_ICON_PROMPT: _tool_create_icon_prompt,
    SAVE_GENERATED_ICON: _tool_save_generated_icon,
}


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Optional[Dict[str, Any]],
    logger: Logger,
) -> ToolResponse:
    arguments = arguments or {}
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    handler = HANDLERS.get(name)
    if handler is None:
        logger.error("Unknown tool requested", tool=name, available_tools=list(HANDLERS.keys()))
        return _respond(unknown_tool_payload(name))

    try:
        result = await handler(arguments)
        logger.info("Tool completed", tool=name)
        return result
    except IconGenError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return _respond(map_error_for_mcp(exc))
    except Exception as exc:
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _respond(failure_payload("UNEXPECTED_ERROR", f"Unexpected error: {exc}"))

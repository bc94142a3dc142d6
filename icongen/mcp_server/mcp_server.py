#!/usr/bin/env python3
"""Icon prompt MCP server.

Implements the Model Context Protocol for a two-step icon workflow:
1. create_icon_prompt builds an expert prompt (optionally with SVG/PNG
   references and a few-shot style) plus a suggested filename
2. The caller's own LLM generates the SVG, then save_generated_icon writes
   it to disk with conflict-safe naming

The server never calls an LLM itself. Transports: stdio (default for
desktop MCP clients) and Streamable HTTP (see ``server.py``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool

from icongen.logger import Logger, session_logger
from icongen.mcp_server.components import initialize_components
from icongen.mcp_server.routing import dispatch_tool_call
from icongen.mcp_server.state import set_components
from icongen.mcp_server.tool_schemas import build_tools
from icongen.mcp_server.tool_types import ToolResponse

app = Server("icongen-mcp")
logger: Logger = session_logger

# Optional overrides (set by main_mcp.py or tests)
styles_dir_override: Optional[str] = None
output_dir_override: Optional[str] = None
multimodal_override: Optional[bool] = None


async def initialize_server() -> None:
    """Initialize server components."""
    logger.info("Initialising icon MCP server")
    set_components(
        initialize_components(
            styles_dir_override=styles_dir_override,
            output_dir_override=output_dir_override,
            multimodal_override=multimodal_override,
            logger=logger,
        )
    )


@app.list_tools()
async def handle_list_tools() -> List[Tool]:
    return await build_tools()


@app.call_tool()
async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> ToolResponse:
    return await dispatch_tool_call(name=name, arguments=arguments, logger=logger)


async def run_stdio() -> None:
    """Serve over stdin/stdout until the client disconnects."""
    await initialize_server()
    logger.info("Starting icon MCP server", transport="stdio")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())

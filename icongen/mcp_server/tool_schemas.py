"""MCP tool schemas (list_tools) for the icon service."""

from __future__ import annotations

from typing import List

from mcp.types import Tool

from icongen.mcp_server.facade import IconToolFacade


async def build_tools() -> List[Tool]:
    return [
        Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["input_schema"],
        )
        for definition in IconToolFacade.list_tools()
    ]

"""MCP server package for the icon prompt service."""
from icongen.mcp_server.facade import TOOL_NAMES, IconToolFacade

__all__ = ["IconToolFacade", "TOOL_NAMES"]

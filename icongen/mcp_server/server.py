"""Server lifecycle and StreamableHTTP wiring for MCP server."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from icongen.config import DEFAULT_MCP_HOST, DEFAULT_MCP_PORT
from icongen.mcp_server.facade import TOOL_NAMES
from icongen.mcp_server.mcp_server import app, initialize_server, logger

session_manager_http = StreamableHTTPSessionManager(
    app=app,
    event_store=None,
    json_response=False,
    stateless=False,
)


async def handle_streamable_http(scope, receive, send) -> None:
    await session_manager_http.handle_request(scope, receive, send)


async def handle_health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "service": "icongen-mcp", "tools": list(TOOL_NAMES)})


@contextlib.asynccontextmanager
async def lifespan(starlette_app) -> AsyncIterator[None]:
    logger.info("Starting StreamableHTTP session manager")
    await initialize_server()
    async with session_manager_http.run():
        logger.info("StreamableHTTP session manager ready")
        yield


starlette_app = Starlette(
    debug=False,
    routes=[
        Route("/health", endpoint=handle_health, methods=["GET"]),
        Mount("/mcp/", app=handle_streamable_http),
    ],
    lifespan=lifespan,
)

starlette_app = CORSMiddleware(
    starlette_app,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    expose_headers=["Mcp-Session-Id"],
)


async def main(host: str = DEFAULT_MCP_HOST, port: int = DEFAULT_MCP_PORT) -> None:
    import uvicorn

    logger.info("Starting icon MCP server", host=host, port=port, transport="Streamable HTTP")
    config = uvicorn.Config(starlette_app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()

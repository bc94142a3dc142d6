import argparse
import asyncio
import sys
from typing import List, Optional

from icongen.config import Config
from icongen.logger import Logger, session_logger

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="icongen MCP Server - expert prompts and safe saving for AI-generated SVG icons"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=Config.get_mcp_host(),
        help="Host address to bind to for http (default: 127.0.0.1, or ICONGEN_MCP_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.get_mcp_port(),
        help="Port number for http (default: 8030, or ICONGEN_MCP_PORT env var)",
    )
    parser.add_argument(
        "--styles-dir",
        type=str,
        default=None,
        help="Path to styles directory (default: bundled icongen/content/styles)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Default directory for saved icons (default: ICONGEN_OUTPUT_DIR or the working directory)",
    )
    multimodal = parser.add_mutually_exclusive_group()
    multimodal.add_argument(
        "--multimodal",
        dest="multimodal",
        action="store_true",
        default=None,
        help="Declare that the calling LLM accepts images (allows PNG references)",
    )
    multimodal.add_argument(
        "--no-multimodal",
        dest="multimodal",
        action="store_false",
        help="Declare that the calling LLM is text-only (rejects PNG references)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    import icongen.mcp_server.mcp_server as mcp_server_module

    mcp_server_module.styles_dir_override = args.styles_dir
    mcp_server_module.output_dir_override = args.output_dir
    mcp_server_module.multimodal_override = args.multimodal

    try:
        if args.transport == "http":
            from icongen.mcp_server.server import main as serve_http

            logger.info("Starting MCP server", host=args.host, port=args.port, transport="Streamable HTTP")
            asyncio.run(serve_http(host=args.host, port=args.port))
        else:
            asyncio.run(mcp_server_module.run_stdio())
        logger.info("MCP server shutdown complete")
        return 0
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        return 0
    except Exception as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        return 1


if __name__ == "__main__":
    sys.exit(main())

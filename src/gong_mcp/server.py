#!/usr/bin/env python3
"""
Gong MCP Server - Provides read access to Gong calls, transcripts, and call details.

Usage:
    python -m gong_mcp.server

Environment Variables:
    GONG_ACCESS_KEY: Your Gong API access key (required)
    GONG_ACCESS_SECRET: Your Gong API access key secret (required)
    GONG_BASE_URL: API base URL (optional, default: https://api.gong.io/v2)
    GONG_TIMEOUT: Request timeout in seconds (optional, default: 30)
    GONG_LOG_LEVEL: Log level for stderr logging (optional, default: WARNING)
"""

import logging
import sys

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .client import GongClient
from .config import Settings, load_settings
from .errors import ConfigurationError
from .tools import ToolRouter

logger = logging.getLogger(__name__)


def create_server(router: ToolRouter) -> Server:
    """Build an MCP server whose tools are served by ``router``."""
    server = Server("gong", version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return router.list_tools()

    # Registered directly: the call_tool decorator replaces missing arguments
    # with {} and checks them against the advertised schema. The router does both.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await router.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result.to_call_tool_result())

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


def configure_logging(level: str) -> None:
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def serve(settings: Settings) -> None:
    """Serve the Gong tools over stdio until the client disconnects."""
    async with GongClient(settings) as client:
        server = create_server(ToolRouter(client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Gong MCP server %s ready on stdio", __version__)
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Main entry point for the MCP server."""
    try:
        # Validate credentials before serving anything
        settings = load_settings()
        configure_logging(settings.log_level)

        anyio.run(serve, settings)

    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Fatal error running server: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""MCP stdio server exposing the web_search tool."""

import asyncio
import sys
from typing import Any

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from searxng_mcp import __version__
from searxng_mcp.mcp_tools import WEB_SEARCH_TOOL, call_tool
from searxng_mcp.tools.searxng import SearxngTool
from searxng_mcp.utils.config import configure_logging, get_settings
from searxng_mcp.utils.models import SearxngConfig

logger = structlog.get_logger()

SERVER_NAME = "searxng-mcp"


def create_server(config: SearxngConfig) -> Server:
    """
    Create the MCP server with web_search registered.

    Args:
        config: SearXNG connection settings, fixed for the server's lifetime

    Returns:
        Low-level MCP Server ready to be run on a transport
    """
    server: Server = Server(SERVER_NAME, version=__version__)
    tool = SearxngTool(config)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [WEB_SEARCH_TOOL]

    # Arguments are checked by call_tool itself, which reports bad input
    # as an error result instead of a protocol error.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        return await call_tool(name, arguments, tool)

    return server


async def run_server() -> None:
    """Serve web_search over stdio until the client disconnects."""
    settings = get_settings()
    configure_logging(settings)

    server = create_server(settings.to_search_config())
    logger.info(
        "SearXNG Search MCP Server running on stdio",
        instances=list(settings.instances),
        version=__version__,
    )

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    configure_logging()
    try:
        asyncio.run(run_server())
    except Exception as e:
        logger.error("Fatal error running server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)

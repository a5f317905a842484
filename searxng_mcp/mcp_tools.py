"""MCP tool definition and dispatch for web_search.

``call_tool`` is the whole contract seen by MCP clients:
- Arguments are shape-checked before any network call
- Results come back as formatted text
- Errors never escape; they are returned as an error result
"""

from typing import Any

import mcp.types as types
import structlog
from pydantic import ValidationError

from searxng_mcp.tools.base import SearchTool
from searxng_mcp.utils.exceptions import InvalidArgumentsError, InvalidToolError
from searxng_mcp.utils.models import SEARCH_CATEGORIES, WebSearchArgs, is_web_search_args
from searxng_mcp.utils.text_utils import format_search_results

logger = structlog.get_logger()

WEB_SEARCH_TOOL_NAME = "web_search"

WEB_SEARCH_TOOL = types.Tool(
    name=WEB_SEARCH_TOOL_NAME,
    description=(
        "Performs a web search using SearXNG, ideal for general queries, news, articles "
        "and online content. Supports multiple search categories, languages, time ranges "
        "and safe search filtering. Returns relevant results from multiple search engines "
        "combined."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query"},
            "page": {"type": "number", "description": "Page number (default 1)", "default": 1},
            "language": {
                "type": "string",
                "description": "Search language code (e.g. 'en', 'zh', 'jp', 'all')",
                "default": "all",
            },
            "categories": {
                "type": "array",
                "items": {"type": "string", "enum": SEARCH_CATEGORIES},
                "default": ["general"],
            },
            "time_range": {
                "type": "string",
                "enum": ["", "day", "week", "month", "year"],
                "default": "",
            },
            "safesearch": {
                "type": "number",
                "description": "0: None, 1: Moderate, 2: Strict",
                "default": 1,
            },
        },
        "required": ["query"],
    },
)


def parse_web_search_args(arguments: Any) -> WebSearchArgs:
    """Validate untrusted arguments and apply defaults.

    Raises:
        InvalidArgumentsError: If the shape check or normalization fails
    """
    if not is_web_search_args(arguments):
        raise InvalidArgumentsError(f"Invalid arguments for {WEB_SEARCH_TOOL_NAME}")

    try:
        return WebSearchArgs.model_validate(dict(arguments))
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid arguments for {WEB_SEARCH_TOOL_NAME}: {e}") from e


async def web_search(tool: SearchTool, arguments: Any) -> str:
    """Search the web and return formatted results.

    Args:
        tool: Search tool to run the query against
        arguments: Raw tool arguments (must contain a string ``query``)

    Returns:
        Result blocks (Title, URL, Content, Source) separated by blank lines
    """
    args = parse_web_search_args(arguments)
    response = await tool.search(args)
    return format_search_results(response.results)


async def call_tool(name: str, arguments: Any, tool: SearchTool) -> types.CallToolResult:
    """Dispatch an MCP tool call. Never raises."""
    try:
        if name != WEB_SEARCH_TOOL_NAME or arguments is None:
            raise InvalidToolError(f"Invalid tool or arguments: expected '{WEB_SEARCH_TOOL_NAME}'")

        text = await web_search(tool, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=text)],
            isError=False,
        )
    except Exception as e:
        logger.error("Search failed", tool=name, error=str(e))
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=str(e))],
            isError=True,
        )

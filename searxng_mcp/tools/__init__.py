"""Search tools package."""

from searxng_mcp.tools.base import SearchTool
from searxng_mcp.tools.searxng import SearxngTool

__all__ = [
    "SearchTool",
    "SearxngTool",
]

#!/usr/bin/env python3
"""
Demo: Search the web through SearXNG with instance fallback.

This script runs the same path as the MCP web_search tool:
- Settings are read from the environment (SEARXNG_INSTANCES, ...)
- Instances are tried in order until one returns results
- Results are rendered exactly as MCP clients receive them

Usage:
    # From project root:
    python examples/search_demo/run_search.py

    # With custom query and instances:
    SEARXNG_INSTANCES=http://localhost:8080,https://searx.example \
        python examples/search_demo/run_search.py "python asyncio"
"""

import asyncio
import sys

from searxng_mcp.mcp_tools import call_tool
from searxng_mcp.tools.searxng import SearxngTool
from searxng_mcp.utils.config import configure_logging, get_settings


async def main(query: str) -> None:
    """Run search demo with the given query."""
    settings = get_settings()
    configure_logging(settings)

    print(f"\n{'=' * 60}")
    print("SearXNG Search Demo")
    print(f"Query: {query}")
    print(f"Instances: {', '.join(settings.instances)}")
    print(f"{'=' * 60}\n")

    tool = SearxngTool(settings.to_search_config())
    result = await call_tool("web_search", {"query": query}, tool)

    if result.isError:
        print(f"Search failed: {result.content[0].text}")
        sys.exit(1)

    print(result.content[0].text)


if __name__ == "__main__":
    query = sys.argv[1] if len(sys.argv) > 1 else "open source metasearch engine"
    asyncio.run(main(query))

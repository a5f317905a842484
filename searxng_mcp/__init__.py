"""SearXNG meta-search exposed as an MCP web_search tool."""

__version__ = "0.4.0"

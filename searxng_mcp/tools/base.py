"""Base protocol for search tools."""

from typing import Protocol

from searxng_mcp.utils.models import SearchResponse, WebSearchArgs


class SearchTool(Protocol):
    """Protocol defining the interface the web_search tool calls into."""

    @property
    def name(self) -> str:
        """Human-readable name of this tool."""
        ...

    async def search(self, args: WebSearchArgs) -> SearchResponse:
        """
        Execute a search and return a non-empty result set.

        Args:
            args: Normalized search arguments

        Returns:
            SearchResponse with at least one result

        Raises:
            SearchError: If no backend produced results
        """
        ...

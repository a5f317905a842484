"""Text rendering of search results for tool responses."""

from collections.abc import Iterable

from searxng_mcp.utils.models import SearchResultRecord


def format_search_result(result: SearchResultRecord) -> str:
    """Render one result as a ``Title/URL/Content/Source`` block.

    Content and Source lines are only present when the field is non-empty.
    The block has no trailing newline.
    """
    parts = [
        f"Title: {result.title}",
        f"URL: {result.url}",
    ]

    if result.content:
        parts.append(f"Content: {result.content}")

    if result.engine:
        parts.append(f"Source: {result.engine}")

    return "\n".join(parts)


def format_search_results(results: Iterable[SearchResultRecord]) -> str:
    """Render results in order, separated by a blank line."""
    return "\n\n".join(format_search_result(result) for result in results)

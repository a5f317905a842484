"""Shared pytest fixtures for all tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from searxng_mcp.utils.models import SearchResponse, SearchResultRecord, SearxngConfig


@pytest.fixture
def search_config() -> SearxngConfig:
    """Two-instance config, primary first."""
    return SearxngConfig(
        instances=("https://instance1", "https://instance2"),
        user_agent="test-agent/1.0",
    )


@pytest.fixture
def mock_client(mocker):
    """Mock httpx.AsyncClient with context manager support."""
    client = AsyncMock()
    client.__aenter__.return_value = client
    client.__aexit__.return_value = None
    mocker.patch("httpx.AsyncClient", return_value=client)
    return client


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A SearXNG JSON body with one complete result."""
    return {
        "query": "test",
        "number_of_results": 1,
        "results": [
            {
                "title": "Test",
                "url": "https://test.com",
                "content": "Test content",
                "engine": "test-engine",
                "score": 1.0,
            }
        ],
    }


@pytest.fixture
def sample_response() -> SearchResponse:
    """Parsed response with two results, the second without optional fields."""
    return SearchResponse(
        results=[
            SearchResultRecord(
                title="SearXNG",
                url="https://searxng.org",
                content="Privacy-respecting metasearch engine",
                engine="duckduckgo",
            ),
            SearchResultRecord(title="Docs", url="https://docs.searxng.org"),
        ]
    )

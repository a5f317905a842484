"""Data models for the web_search tool."""

from collections.abc import Mapping
from typing import Any, Literal

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

logger = structlog.get_logger()

TimeRange = Literal["", "day", "week", "month", "year"]

# Categories advertised in the tool schema; SearXNG accepts others too.
SEARCH_CATEGORIES = [
    "general",
    "news",
    "science",
    "files",
    "images",
    "videos",
    "music",
    "social media",
    "it",
]


def is_web_search_args(args: Any) -> bool:
    """Check that untrusted tool arguments carry a string ``query``.

    This is a shape guard only: the query may be empty and every other
    field is left for ``WebSearchArgs`` to default and validate.
    """
    return isinstance(args, Mapping) and isinstance(args.get("query"), str)


class WebSearchArgs(BaseModel):
    """Normalized arguments of a web_search call."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    query: str = Field(description="Free-text search query")
    page: int = Field(default=1, ge=1, description="Result page number")
    language: str = Field(default="all", description="Language code, e.g. 'en'")
    categories: list[str] = Field(default_factory=lambda: ["general"])
    time_range: TimeRange = ""
    safesearch: int = Field(default=1, ge=0, le=2, description="0: None, 1: Moderate, 2: Strict")

    @field_validator("page", "language", "categories", "time_range", mode="before")
    @classmethod
    def _falsy_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value:
            return value
        field = cls.model_fields[info.field_name]
        return field.get_default(call_default_factory=True)

    @field_validator("safesearch", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any) -> Any:
        # 0 is a real level, only a missing value falls back
        return 1 if value is None else value

    def to_form_data(self) -> dict[str, str]:
        """Render the form-encoded body expected by ``POST /search``."""
        return {
            "q": self.query,
            "pageno": str(self.page),
            "language": self.language,
            "categories": ",".join(self.categories) or "general",
            "time_range": self.time_range,
            "safesearch": str(self.safesearch),
            "format": "json",
        }


class SearchResultRecord(BaseModel):
    """A single result as returned by a SearXNG instance."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str
    content: str | None = None
    engine: str | None = None

    @field_validator("content", "engine", mode="before")
    @classmethod
    def _non_string_is_absent(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class SearchResponse(BaseModel):
    """The usable part of a SearXNG JSON response."""

    results: list[SearchResultRecord] = Field(default_factory=list)


class SearxngConfig(BaseModel):
    """Immutable connection settings shared by every search call."""

    model_config = ConfigDict(frozen=True)

    instances: tuple[str, ...] = Field(min_length=1, description="Base URLs in fallback order")
    user_agent: str = "MCP-SearXNG/1.0"
    timeout: float = Field(default=5.0, gt=0, description="Per-instance wait ceiling in seconds")
    verify_tls: bool = True


def parse_search_response(payload: Any) -> SearchResponse:
    """Map an untrusted JSON body to a ``SearchResponse``.

    Records without a string title and url are dropped, so an instance
    that only returns junk ends up with an empty result set.
    """
    if not isinstance(payload, Mapping):
        return SearchResponse()

    raw_results = payload.get("results")
    if not isinstance(raw_results, list):
        return SearchResponse()

    records: list[SearchResultRecord] = []
    for raw in raw_results:
        try:
            records.append(SearchResultRecord.model_validate(raw))
        except ValidationError as e:
            logger.debug("Dropping malformed search result", error=str(e))

    return SearchResponse(results=records)

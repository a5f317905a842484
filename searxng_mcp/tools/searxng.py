"""SearXNG search tool with sequential instance fallback."""

import asyncio

import httpx
import structlog

from searxng_mcp.utils.exceptions import AllInstancesFailedError, SearchError
from searxng_mcp.utils.models import (
    SearchResponse,
    SearxngConfig,
    WebSearchArgs,
    parse_search_response,
)

logger = structlog.get_logger()


class SearxngTool:
    """
    Search the web through one or more SearXNG instances.

    Instances are treated as mirrors of the same service and tried strictly
    in configured order, one request at a time. The first instance that
    answers with a non-empty result list wins; any failure (transport error,
    timeout, bad status, empty or undecodable body) moves on to the next one.
    No instance is retried within a single search.

    API Docs: https://docs.searxng.org/dev/search_api.html
    """

    SEARCH_PATH = "/search"

    def __init__(self, config: SearxngConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return "searxng"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": self.config.user_agent,
        }

    async def search(self, args: WebSearchArgs) -> SearchResponse:
        """
        Search each instance in turn until one returns results.

        Args:
            args: Normalized search arguments

        Returns:
            The first SearchResponse with at least one result

        Raises:
            AllInstancesFailedError: If every instance failed
        """
        form = args.to_form_data()
        errors: list[str] = []

        logger.info("Starting search", query=args.query, instances=list(self.config.instances))

        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.config.timeout,
            verify=self.config.verify_tls,
        ) as client:
            for instance in self.config.instances:
                try:
                    result = await self._search_with_timeout(client, instance, form)
                except SearchError as e:
                    errors.append(f"{instance}: {e}")
                    logger.warning("SearXNG instance failed", instance=instance, error=str(e))
                    continue

                logger.info(
                    "SearXNG instance succeeded", instance=instance, count=len(result.results)
                )
                return result

        raise AllInstancesFailedError(
            "All SearXNG instances failed. Please ensure SearXNG is running on one of "
            "these instances: " + ", ".join(self.config.instances),
            attempted_instances=list(self.config.instances),
            errors=errors,
        )

    async def _search_with_timeout(
        self,
        client: httpx.AsyncClient,
        instance: str,
        form: dict[str, str],
    ) -> SearchResponse:
        """Query a single instance, abandoning it after the configured timeout."""
        try:
            return await asyncio.wait_for(
                self._search_instance(client, instance, form),
                timeout=self.config.timeout,
            )
        except TimeoutError as e:
            raise SearchError(f"timed out after {self.config.timeout}s") from e

    async def _search_instance(
        self,
        client: httpx.AsyncClient,
        instance: str,
        form: dict[str, str],
    ) -> SearchResponse:
        try:
            url = httpx.URL(instance).join(self.SEARCH_PATH)
        except httpx.InvalidURL as e:
            raise SearchError(f"is not a valid URL: {e}") from e

        try:
            response = await client.post(str(url), data=form)
        except httpx.RequestError as e:
            raise SearchError(f"connection failed: {e!r}") from e

        if not response.is_success:
            raise SearchError(f"returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise SearchError("returned a body that is not valid JSON") from e

        result = parse_search_response(payload)
        if not result.results:
            raise SearchError("returned no results")

        return result

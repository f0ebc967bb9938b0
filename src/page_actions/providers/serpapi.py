"""SerpAPI search provider."""

import time
from typing import Any

import httpx
import structlog

from page_actions.exceptions import (
    ProviderAPIError,
    ProviderError,
    ProviderNotConfiguredError,
)
from page_actions.models.search import SerpQuery

logger = structlog.get_logger(__name__)

SERPAPI_BASE_URL = "https://serpapi.com/search.json"

# Organic result fields passed through to callers
ORGANIC_RESULT_FIELDS = (
    "position",
    "title",
    "link",
    "displayed_link",
    "snippet",
    "rich_snippet",
    "sitelinks",
)


class SerpAPIProvider:
    """
    SerpAPI search provider.

    SerpAPI provides structured Google search results. Responses are slimmed
    down to the parts an LLM caller needs.

    https://serpapi.com/
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize the SerpAPI provider.

        Args:
            api_key: SerpAPI API key
            http_client: Shared HTTP client (optional)
            timeout_seconds: Request timeout when no shared client is given
        """
        self._api_key = api_key
        self._http_client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout_seconds

    @property
    def name(self) -> str:
        """Return the provider name."""
        return "serpapi"

    @property
    def is_configured(self) -> bool:
        """Return True if the provider is configured."""
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    def _build_params(self, query: SerpQuery) -> dict[str, str]:
        params = {
            "engine": "google",
            "q": query.q,
            "api_key": self._api_key or "",
        }
        if query.location:
            params["location"] = query.location
        if query.hl:
            params["hl"] = query.hl
        if query.gl:
            params["gl"] = query.gl
        if query.num:
            params["num"] = str(query.num)
        return params

    async def search(self, query: SerpQuery) -> dict[str, Any]:
        """
        Run a Google search through SerpAPI.

        Args:
            query: Validated search parameters

        Returns:
            Slimmed search payload

        Raises:
            ProviderNotConfiguredError: If no API key is configured
            ProviderAPIError: If SerpAPI answers with a non-2xx status
            ProviderError: If the request fails or the body is not JSON
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError(self.name, "SERPAPI_KEY")

        client = await self._get_client()

        try:
            start_time = time.monotonic()
            response = await client.get(SERPAPI_BASE_URL, params=self._build_params(query))
            elapsed_ms = (time.monotonic() - start_time) * 1000

            logger.debug(
                "serpapi_request",
                query=query.q[:50],
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )

            if not response.is_success:
                raise ProviderAPIError(self.name, response.status_code, response.text[:200])

            try:
                data = response.json()
            except ValueError as e:
                raise ProviderError(self.name, "Invalid JSON response") from e

        except httpx.RequestError as e:
            logger.warning("serpapi_request_error", error=str(e))
            raise ProviderError(self.name, f"Request failed: {e}") from e
        finally:
            if self._owns_client:
                await client.aclose()

        return self._slim_response(data if isinstance(data, dict) else {})

    @staticmethod
    def _slim_response(data: dict[str, Any]) -> dict[str, Any]:
        """Reshape a SerpAPI response into the compact payload."""
        organic_results = []
        for item in data.get("organic_results") or []:
            if not isinstance(item, dict):
                logger.warning("serpapi_parse_error", item=item)
                continue
            # Fields absent upstream stay absent
            organic_results.append({k: item[k] for k in ORGANIC_RESULT_FIELDS if k in item})

        return {
            "query": data.get("search_parameters") or {},
            "search_metadata": data.get("search_metadata") or {},
            "knowledge_graph": data.get("knowledge_graph"),
            "related_questions": data.get("related_questions") or [],
            "related_searches": data.get("related_searches") or [],
            "organic_results": organic_results,
        }

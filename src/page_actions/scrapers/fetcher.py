"""HTML fetcher with strict status and content-type gating."""

import time

import httpx
import structlog

from page_actions.config.settings import DEFAULT_USER_AGENT
from page_actions.exceptions import (
    FetchConnectionError,
    FetchStatusError,
    FetchTimeoutError,
    InvalidURLError,
    UnsupportedContentTypeError,
)
from page_actions.models.page import FetchResult
from page_actions.utils.urls import is_html_content_type, is_http_url

logger = structlog.get_logger(__name__)

ACCEPT_HEADER = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.1"


class HtmlFetcher:
    """
    Retrieves the HTML of a single URL.

    Issues exactly one GET per call, follows redirects and never retries.
    Only text is downloaded; scripts and sub-resources are never loaded.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 20.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            http_client: Shared HTTP client (optional)
            timeout_seconds: Per-request timeout
            user_agent: Client identifier sent with every request
        """
        self._http_client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout_seconds
        self._user_agent = user_agent

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* and return its HTML.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchResult with the decoded document

        Raises:
            InvalidURLError: If the URL is not an absolute http(s) URL
            FetchConnectionError: If the transport call fails
            FetchTimeoutError: If the request exceeds the timeout
            FetchStatusError: If the status is not 2xx
            UnsupportedContentTypeError: If the body is not HTML or XHTML
        """
        if not is_http_url(url):
            raise InvalidURLError(url)

        client = await self._get_client()
        start_time = time.monotonic()

        try:
            # The stream context closes the response on every path,
            # including the gating failures below.
            async with client.stream(
                "GET",
                url,
                headers={"User-Agent": self._user_agent, "Accept": ACCEPT_HEADER},
                timeout=self._timeout,
                follow_redirects=True,
            ) as response:
                content_type = response.headers.get("content-type", "")

                if not response.is_success:
                    raise FetchStatusError(url, response.status_code)
                if not is_html_content_type(content_type):
                    raise UnsupportedContentTypeError(url, content_type)

                await response.aread()
                html = response.text
                status_code = response.status_code

        except httpx.TimeoutException as e:
            logger.warning("fetch_timeout", url=url, timeout_seconds=self._timeout)
            raise FetchTimeoutError(url, self._timeout) from e
        except httpx.RequestError as e:
            logger.warning("fetch_request_error", url=url, error=str(e))
            raise FetchConnectionError(url, str(e) or e.__class__.__name__) from e
        finally:
            if self._owns_client:
                await client.aclose()

        logger.debug(
            "page_fetched",
            url=url,
            status_code=status_code,
            content_type=content_type,
            length=len(html),
            elapsed_ms=(time.monotonic() - start_time) * 1000,
        )

        return FetchResult(
            url=url,
            status_code=status_code,
            content_type=content_type,
            html=html,
        )

"""
Shared application resources.

Everything is built from one Settings instance at startup and torn down on
shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
import structlog

from page_actions.auth import ApiKeyAuthorizer
from page_actions.config import Settings
from page_actions.providers.serpapi import SerpAPIProvider
from page_actions.scrapers.base import ArticleExtractor
from page_actions.scrapers.batch import BatchExtractor
from page_actions.scrapers.fetcher import HtmlFetcher
from page_actions.scrapers.page import PageExtractor

logger = structlog.get_logger(__name__)


@dataclass
class AppContext:
    """Shared application resources available to all routes."""

    settings: Settings
    http_client: httpx.AsyncClient
    authorizer: ApiKeyAuthorizer
    page_extractor: PageExtractor
    batch_extractor: BatchExtractor
    serp_provider: SerpAPIProvider


def create_article_extractor(settings: Settings) -> ArticleExtractor:
    """
    Create the configured article extractor.

    Args:
        settings: Application settings

    Returns:
        Article extractor instance
    """
    if settings.article_extractor == "trafilatura":
        from page_actions.scrapers.trafilatura_extractor import TrafilaturaArticleExtractor

        logger.info("using_trafilatura_extractor")
        return TrafilaturaArticleExtractor()

    from page_actions.scrapers.readability_extractor import ReadabilityArticleExtractor

    logger.info("using_readability_extractor")
    return ReadabilityArticleExtractor()


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """HTTP client with connection pooling, shared by fetcher and provider."""
    return httpx.AsyncClient(
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
        timeout=httpx.Timeout(
            connect=5.0,
            read=settings.fetch_timeout_seconds,
            write=10.0,
            pool=5.0,
        ),
        http2=True,
        follow_redirects=True,
    )


@asynccontextmanager
async def app_lifespan(settings: Settings) -> AsyncIterator[AppContext]:
    """
    Manage application lifecycle.

    Initialize expensive resources once, share across all requests.
    """
    logger.info(
        "starting_page_actions",
        debug=settings.debug,
        article_extractor=settings.article_extractor,
        serpapi_configured=settings.is_serpapi_configured(),
        api_key_configured=settings.is_actions_key_configured(),
    )

    http_client = create_http_client(settings)

    fetcher = HtmlFetcher(
        http_client=http_client,
        timeout_seconds=settings.fetch_timeout_seconds,
        user_agent=settings.user_agent,
    )
    page_extractor = PageExtractor(fetcher, create_article_extractor(settings))
    batch_extractor = BatchExtractor(
        page_extractor.extract,
        default_concurrency=settings.batch_default_concurrency,
    )

    try:
        yield AppContext(
            settings=settings,
            http_client=http_client,
            authorizer=ApiKeyAuthorizer(settings.actions_api_key),
            page_extractor=page_extractor,
            batch_extractor=batch_extractor,
            serp_provider=SerpAPIProvider(
                api_key=settings.serpapi_key,
                http_client=http_client,
            ),
        )
    finally:
        logger.info("shutting_down_page_actions")
        await http_client.aclose()

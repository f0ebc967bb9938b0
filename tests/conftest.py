"""Shared test fixtures for the Page Actions test suite."""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import respx

# ─── Pytest Configuration ────────────────────────────────────────


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no I/O)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


# ─── Async Backend ───────────────────────────────────────────────


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


# ─── Settings Fixtures ───────────────────────────────────────────


@pytest.fixture
def test_settings():
    """Test settings with no secrets configured."""
    from page_actions.config import Settings

    return Settings(
        _env_file=None,
        debug=True,
        log_level="DEBUG",
        actions_api_key=None,
        serpapi_key=None,
    )


@pytest.fixture
def mock_settings():
    """Settings with mock secrets for testing."""
    from page_actions.config import Settings

    return Settings(
        _env_file=None,
        debug=True,
        actions_api_key="test-actions-key",
        serpapi_key="test-serpapi-key",
        fetch_timeout_seconds=5.0,
    )


@pytest.fixture
def auth_headers(mock_settings) -> dict[str, str]:
    """Headers carrying the mock API key."""
    return {"X-API-KEY": mock_settings.actions_api_key}


# ─── HTTP Client Fixtures ────────────────────────────────────────


@pytest.fixture
async def http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client for tests."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client


@pytest.fixture
def mock_http():
    """RESPX mock router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


# ─── Pipeline Fixtures ───────────────────────────────────────────


@pytest.fixture
def html_fetcher():
    """Fetcher that creates its own client per call."""
    from page_actions.scrapers.fetcher import HtmlFetcher

    return HtmlFetcher(timeout_seconds=5.0)


@pytest.fixture
def page_extractor(html_fetcher):
    """Page extractor using readability."""
    from page_actions.scrapers.page import PageExtractor
    from page_actions.scrapers.readability_extractor import ReadabilityArticleExtractor

    return PageExtractor(html_fetcher, ReadabilityArticleExtractor())


@pytest.fixture
def serpapi_provider(mock_settings):
    """SerpAPI provider with mock settings."""
    from page_actions.providers.serpapi import SerpAPIProvider

    return SerpAPIProvider(api_key=mock_settings.serpapi_key)


# ─── Sample Data Fixtures ────────────────────────────────────────


ARTICLE_BODY = " ".join(
    f"Sentence number {i} explains how the battery chemistry behaves, in detail."
    for i in range(1, 15)
)


@pytest.fixture
def article_body() -> str:
    """Roughly 1000 characters of article prose."""
    return ARTICLE_BODY


@pytest.fixture
def sample_html_content(article_body) -> str:
    """Sample article page for extraction tests."""
    return f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="description" content="  Test page description  ">
        <link rel="canonical" href=" https://example.com/article ">
        <title> Hello </title>
    </head>
    <body>
        <nav><a href="/home">Home</a> <a href="javascript:void(0)">Menu</a></nav>
        <article>
            <h1>Intro</h1>
            <p>{article_body}</p>
            <h2>Details</h2>
            <p>Read the <a href="https://example.com/more">full report</a> for more.</p>
        </article>
        <footer><a href="/privacy"> Privacy </a></footer>
    </body>
    </html>
    """


@pytest.fixture
def sample_serpapi_response() -> dict:
    """Sample SerpAPI response for mocking."""
    return {
        "search_parameters": {"engine": "google", "q": "python"},
        "search_metadata": {
            "status": "Success",
            "total_time_taken": 0.45,
        },
        "knowledge_graph": {"title": "Python"},
        "related_questions": [{"question": "What is Python?"}],
        "organic_results": [
            {
                "position": 1,
                "title": "Python.org",
                "link": "https://www.python.org/",
                "displayed_link": "www.python.org",
                "snippet": "The official home of the Python Programming Language.",
                "source": "Python.org",
                "favicon": "https://www.python.org/favicon.ico",
            },
            {
                "position": 2,
                "title": "Python Tutorial",
                "link": "https://docs.python.org/3/tutorial/",
                "snippet": "Python is an easy to learn, powerful programming language.",
                "sitelinks": {"inline": [{"title": "Library"}]},
            },
        ],
    }

"""Single-page extraction: fetch, parse once, extract structure and article text."""

import time

import anyio
import structlog

from page_actions.models.page import ExtractionRecord, FetchResult
from page_actions.scrapers.base import ArticleExtractor
from page_actions.scrapers.fetcher import HtmlFetcher
from page_actions.scrapers.structure import extract_structure, parse_document

logger = structlog.get_logger(__name__)


class PageExtractor:
    """
    Composes the fetcher and both extractors into one record per URL.

    Structure and article extraction run over the same parsed tree. Fetch
    failures propagate unchanged; extraction itself only degrades.
    """

    def __init__(self, fetcher: HtmlFetcher, article_extractor: ArticleExtractor) -> None:
        self._fetcher = fetcher
        self._article_extractor = article_extractor

    @property
    def article_extractor(self) -> ArticleExtractor:
        return self._article_extractor

    async def fetch(self, url: str) -> FetchResult:
        """Fetch the raw HTML of *url*."""
        return await self._fetcher.fetch(url)

    async def extract(self, url: str) -> ExtractionRecord:
        """
        Fetch *url* and build its extraction record.

        Args:
            url: Absolute http(s) URL

        Returns:
            ExtractionRecord with every field present

        Raises:
            FetchError: If retrieval fails or the document cannot be parsed
        """
        start_time = time.monotonic()
        fetched = await self._fetcher.fetch(url)

        # Parsing and scoring are CPU work; keep them off the event loop
        record = await anyio.to_thread.run_sync(self.build_record, fetched.html, url)

        logger.info(
            "page_extracted",
            url=url,
            extractor=self._article_extractor.name,
            headings=len(record.headings),
            links=len(record.links),
            text_length=len(record.text_content),
            elapsed_ms=(time.monotonic() - start_time) * 1000,
        )
        return record

    def build_record(self, html: str, url: str) -> ExtractionRecord:
        """Build a record from already fetched HTML, parsing it exactly once."""
        document = parse_document(html, url)
        structure = extract_structure(document)
        text = self._article_extractor.extract(document)
        return ExtractionRecord.from_parts(url, structure, text)

"""Page fetching and extraction pipeline."""

from page_actions.scrapers.base import ArticleExtractor
from page_actions.scrapers.batch import BatchExtractor
from page_actions.scrapers.fetcher import HtmlFetcher
from page_actions.scrapers.page import PageExtractor
from page_actions.scrapers.structure import extract_structure, parse_document

__all__ = [
    "ArticleExtractor",
    "BatchExtractor",
    "HtmlFetcher",
    "PageExtractor",
    "extract_structure",
    "parse_document",
]

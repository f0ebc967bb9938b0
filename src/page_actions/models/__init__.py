"""Pydantic models for Page Actions."""

from page_actions.models.common import Heading, Link, PageStructure
from page_actions.models.page import (
    BatchExtractRequest,
    BatchItemFailure,
    BatchItemResult,
    BatchItemSuccess,
    BatchResult,
    ExtractionRecord,
    FetchResult,
    PageRequest,
)
from page_actions.models.search import SerpQuery

__all__ = [
    "Heading",
    "Link",
    "PageStructure",
    "PageRequest",
    "BatchExtractRequest",
    "FetchResult",
    "ExtractionRecord",
    "BatchItemSuccess",
    "BatchItemFailure",
    "BatchItemResult",
    "BatchResult",
    "SerpQuery",
]

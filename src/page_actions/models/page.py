"""Page fetching and extraction models."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from page_actions.models.common import Heading, Link, PageStructure
from page_actions.utils.urls import is_http_url

EXCERPT_LENGTH = 600
MAX_LINKS = 200
MAX_BATCH_URLS = 10
MIN_CONCURRENCY = 1
MAX_CONCURRENCY = 5


def _check_url(value: str) -> str:
    if not is_http_url(value):
        raise ValueError("Invalid url")
    return value


class PageRequest(BaseModel):
    """Request body for single-page endpoints."""

    url: str = Field(..., description="Absolute http(s) URL of the page")

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return _check_url(value)


class BatchExtractRequest(BaseModel):
    """Request body for batch extraction."""

    urls: list[str] = Field(..., min_length=1, max_length=MAX_BATCH_URLS)
    concurrency: int | None = Field(
        default=None,
        ge=MIN_CONCURRENCY,
        le=MAX_CONCURRENCY,
        strict=True,
        description="Maximum pages extracted at once",
    )

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("urls")
    @classmethod
    def validate_urls(cls, value: list[str]) -> list[str]:
        for url in value:
            _check_url(url)
        return value


class FetchResult(BaseModel):
    """A successfully retrieved HTML document."""

    url: str
    status_code: int
    content_type: str
    html: str

    model_config = {"extra": "ignore", "frozen": True}


class ExtractionRecord(BaseModel):
    """Normalized extraction output for one URL. Every field is always present."""

    url: str = Field(..., description="The requested URL, echoed")
    title: str = ""
    meta_description: str = ""
    canonical: str = ""
    headings: list[Heading] = Field(default_factory=list)
    text_content: str = ""
    excerpt: str = ""
    links: list[Link] = Field(default_factory=list, max_length=MAX_LINKS)

    model_config = {"extra": "ignore", "frozen": True}

    @classmethod
    def from_parts(cls, url: str, structure: PageStructure, text_content: str) -> "ExtractionRecord":
        """Combine structural fields and article text into a record."""
        text = text_content.strip()
        return cls(
            url=url,
            title=structure.title,
            meta_description=structure.meta_description,
            canonical=structure.canonical,
            headings=structure.headings,
            text_content=text,
            excerpt=text[:EXCERPT_LENGTH],
            links=structure.links[:MAX_LINKS],
        )


class BatchItemSuccess(BaseModel):
    """A batch item whose page was extracted."""

    ok: Literal[True] = True
    data: ExtractionRecord

    model_config = {"extra": "ignore", "frozen": True}


class BatchItemFailure(BaseModel):
    """A batch item whose page could not be fetched or extracted."""

    ok: Literal[False] = False
    url: str
    error: str

    model_config = {"extra": "ignore", "frozen": True}

    @classmethod
    def from_error(cls, url: str, error: str) -> "BatchItemFailure":
        """Create a failed batch item from an error message."""
        return cls(url=url, error=error)


BatchItemResult = BatchItemSuccess | BatchItemFailure


class BatchResult(BaseModel):
    """Ordered batch outcome, one item per requested URL."""

    results: list[BatchItemResult] = Field(default_factory=list)

    model_config = {"extra": "ignore", "frozen": True}

    @property
    def successful(self) -> int:
        """Return the number of extracted pages."""
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        """Return the number of failed pages."""
        return len(self.results) - self.successful

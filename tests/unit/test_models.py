"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from page_actions.models import (
    BatchExtractRequest,
    BatchItemFailure,
    BatchItemSuccess,
    BatchResult,
    ExtractionRecord,
    Heading,
    Link,
    PageRequest,
    PageStructure,
    SerpQuery,
)


class TestPageRequest:
    """Tests for PageRequest model."""

    def test_valid_url_is_kept_verbatim(self):
        request = PageRequest(url="https://Example.com")
        assert request.url == "https://Example.com"

    @pytest.mark.parametrize(
        "url",
        ["", "not a url", "example.com", "ftp://example.com/file", "https://", "http://exa mple.com"],
    )
    def test_invalid_urls_rejected(self, url):
        with pytest.raises(ValidationError):
            PageRequest(url=url)

    def test_missing_url_rejected(self):
        with pytest.raises(ValidationError):
            PageRequest.model_validate({})

    def test_is_frozen(self):
        request = PageRequest(url="https://example.com")
        with pytest.raises(ValidationError):
            request.url = "https://other.com"  # type: ignore[misc]


class TestBatchExtractRequest:
    """Tests for BatchExtractRequest model."""

    def test_defaults(self):
        request = BatchExtractRequest(urls=["https://example.com"])
        assert request.concurrency is None

    def test_url_count_bounds(self):
        with pytest.raises(ValidationError):
            BatchExtractRequest(urls=[])
        with pytest.raises(ValidationError):
            BatchExtractRequest(urls=[f"https://example.com/{i}" for i in range(11)])

        request = BatchExtractRequest(urls=[f"https://example.com/{i}" for i in range(10)])
        assert len(request.urls) == 10

    def test_each_url_validated(self):
        with pytest.raises(ValidationError):
            BatchExtractRequest(urls=["https://example.com", "nope"])

    @pytest.mark.parametrize("concurrency", [0, 6, "2", 2.5])
    def test_concurrency_bounds_and_type(self, concurrency):
        with pytest.raises(ValidationError):
            BatchExtractRequest.model_validate(
                {"urls": ["https://example.com"], "concurrency": concurrency}
            )


class TestExtractionRecord:
    """Tests for ExtractionRecord model."""

    def test_every_field_present_when_empty(self):
        record = ExtractionRecord(url="https://example.com")
        assert record.model_dump() == {
            "url": "https://example.com",
            "title": "",
            "meta_description": "",
            "canonical": "",
            "headings": [],
            "text_content": "",
            "excerpt": "",
            "links": [],
        }

    def test_from_parts_trims_and_derives_excerpt(self):
        structure = PageStructure(
            title="Title",
            headings=[Heading(tag="h1", text="Intro")],
            links=[Link(href="/a", text="A")],
        )
        text = "\n  " + "x" * 700 + "  \n"

        record = ExtractionRecord.from_parts("https://example.com", structure, text)

        assert record.text_content == "x" * 700
        assert record.excerpt == "x" * 600
        assert record.title == "Title"
        assert record.headings[0].tag == "h1"

    def test_excerpt_cuts_mid_word(self):
        text = ("word " * 200).strip()
        record = ExtractionRecord.from_parts("https://example.com", PageStructure(), text)

        assert record.excerpt == text[:600]
        assert len(record.excerpt) == 600

    def test_from_parts_caps_links(self):
        structure = PageStructure(links=[Link(href=f"/{i}") for i in range(250)])
        record = ExtractionRecord.from_parts("https://example.com", structure, "")
        assert len(record.links) == 200

    def test_heading_tag_restricted(self):
        with pytest.raises(ValidationError):
            Heading(tag="h4", text="Nope")


class TestBatchResult:
    """Tests for batch result models."""

    def test_mixed_results_dump(self):
        result = BatchResult(
            results=[
                BatchItemSuccess(data=ExtractionRecord(url="https://a.com")),
                BatchItemFailure.from_error("https://b.com", "Fetch failed: 404"),
            ]
        )

        dumped = result.model_dump()

        assert dumped["results"][0]["ok"] is True
        assert dumped["results"][0]["data"]["url"] == "https://a.com"
        assert dumped["results"][1] == {
            "ok": False,
            "url": "https://b.com",
            "error": "Fetch failed: 404",
        }
        assert result.successful == 1
        assert result.failed == 1


class TestSerpQuery:
    """Tests for SerpQuery model."""

    def test_minimal(self):
        query = SerpQuery(q="python")
        assert query.location is None
        assert query.num is None

    def test_empty_query_rejected(self):
        with pytest.raises(ValidationError):
            SerpQuery(q="")

    @pytest.mark.parametrize("num", [0, 101, "10"])
    def test_num_bounds(self, num):
        with pytest.raises(ValidationError):
            SerpQuery.model_validate({"q": "python", "num": num})

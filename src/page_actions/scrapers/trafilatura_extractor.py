"""Trafilatura-based article extractor."""

import copy

import lxml.html
import structlog
import trafilatura

logger = structlog.get_logger(__name__)


class TrafilaturaArticleExtractor:
    """
    Article extractor backed by trafilatura.

    Trafilatura combines its own boilerplate heuristics with readability and
    jusText fallbacks. Plain text output, tables kept, comments dropped.

    https://github.com/adbar/trafilatura
    """

    def __init__(self, favor_precision: bool = True) -> None:
        self._favor_precision = favor_precision

    @property
    def name(self) -> str:
        """Return the extractor name."""
        return "trafilatura"

    def extract(self, document: lxml.html.HtmlElement) -> str:
        """Return the text of the main article in *document*, or ""."""
        try:
            text = trafilatura.extract(
                copy.deepcopy(document),
                include_comments=False,
                include_tables=True,
                include_links=False,
                include_images=False,
                favor_precision=self._favor_precision,
            )
        except Exception as e:
            logger.warning("trafilatura_error", error=str(e))
            return ""

        return text or ""

"""Readability-based article extractor (default)."""

import lxml.html
import structlog
from readability import Document
from readability.readability import Unparseable

logger = structlog.get_logger(__name__)


class ReadabilityArticleExtractor:
    """
    Article extractor backed by readability-lxml.

    A Python port of Mozilla's Readability: candidate blocks are scored by
    text length, comma density, link density and class/id hints, and the best
    scoring block plus related siblings is kept.

    https://github.com/buriy/python-readability
    """

    @property
    def name(self) -> str:
        """Return the extractor name."""
        return "readability"

    def extract(self, document: lxml.html.HtmlElement) -> str:
        """Return the text of the main article in *document*, or ""."""
        try:
            # readability cleans a deep copy of the tree it is given
            summary = Document(document).summary(html_partial=True)
        except Unparseable as e:
            logger.debug("readability_unparseable", error=str(e))
            return ""
        except Exception as e:
            logger.warning("readability_error", error=str(e))
            return ""

        if not summary or not summary.strip():
            return ""

        try:
            article = lxml.html.fromstring(summary)
        except Exception as e:
            logger.warning("readability_summary_parse_error", error=str(e))
            return ""

        return article.text_content() or ""

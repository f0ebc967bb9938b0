"""Base protocol for article extractors."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

import lxml.html


@runtime_checkable
class ArticleExtractor(Protocol):
    """
    Protocol for main-content (readability-style) extractors.

    Implementations score the blocks of a parsed document and return the text
    of the most article-like content, discarding navigation and other chrome.
    """

    @property
    def name(self) -> str:
        """Return the extractor name."""
        ...

    @abstractmethod
    def extract(self, document: lxml.html.HtmlElement) -> str:
        """
        Return the article text of *document*.

        Implementations must not modify *document*, which is shared with the
        structure extractor, and must never raise: when no article-like
        content is found, or extraction fails, they return an empty string.

        Args:
            document: Parsed document root

        Returns:
            Article text, possibly empty
        """
        ...

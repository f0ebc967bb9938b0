"""
Structural extraction over a parsed HTML document.

Pulls the title, meta description, canonical link, h1-h3 outline and outbound
links. Works on an lxml tree so the same parse can be handed on to the article
extractor.
"""

import lxml.html
import structlog
from lxml import etree

from page_actions.exceptions import DocumentParseError
from page_actions.models.common import Heading, Link, PageStructure
from page_actions.models.page import MAX_LINKS

logger = structlog.get_logger(__name__)

HEADING_TAGS = ("h1", "h2", "h3")
SCRIPT_SCHEME = "javascript:"
_EMPTY_DOCUMENT = b"<html><head></head><body></body></html>"


def parse_document(html: str, url: str | None = None) -> lxml.html.HtmlElement:
    """
    Parse HTML into a traversable lxml tree.

    Broken or partial markup is parsed best-effort; an empty document parses
    to an empty tree rather than failing.

    Args:
        html: Document text
        url: Base URL recorded on the tree

    Returns:
        Root ``<html>`` element

    Raises:
        DocumentParseError: If the parser fails for any reason other than
            an empty document
    """
    # Encoding to bytes lets documents that carry an XML encoding
    # declaration (common for XHTML) parse from a str body.
    parser = lxml.html.HTMLParser(encoding="utf-8")
    data = html.encode("utf-8", errors="replace") if html and html.strip() else _EMPTY_DOCUMENT

    try:
        return lxml.html.document_fromstring(data, parser=parser, base_url=url)
    except etree.ParserError as e:
        logger.debug("empty_document", url=url, error=str(e))
        return lxml.html.document_fromstring(_EMPTY_DOCUMENT, parser=parser, base_url=url)
    except (etree.LxmlError, ValueError) as e:
        raise DocumentParseError(url or "", str(e)) from e


def _text(element: lxml.html.HtmlElement) -> str:
    return (element.text_content() or "").strip()


def _first_attribute(document: lxml.html.HtmlElement, xpath: str, attribute: str) -> str:
    matches = document.xpath(xpath)
    if not matches:
        return ""
    return (matches[0].get(attribute) or "").strip()


def _extract_headings(document: lxml.html.HtmlElement) -> list[Heading]:
    # Grouped by level: every h1, then every h2, then every h3.
    headings: list[Heading] = []
    for tag in HEADING_TAGS:
        for element in document.iter(tag):
            text = _text(element)
            if text:
                headings.append(Heading(tag=tag, text=text))
    return headings


def _extract_links(document: lxml.html.HtmlElement) -> list[Link]:
    links: list[Link] = []
    for anchor in document.xpath("//a[@href]"):
        href = (anchor.get("href") or "").strip()
        if not href or href.startswith(SCRIPT_SCHEME):
            continue
        links.append(Link(href=href, text=_text(anchor)))
        if len(links) >= MAX_LINKS:
            break
    return links


def extract_structure(
    document: str | lxml.html.HtmlElement,
    url: str | None = None,
) -> PageStructure:
    """
    Extract structural fields from an HTML document.

    Args:
        document: HTML text or an already parsed tree
        url: Base URL, used when *document* is text

    Returns:
        PageStructure with empty strings/lists for anything absent
    """
    if isinstance(document, str):
        document = parse_document(document, url)

    titles = document.xpath("//title")
    title = _text(titles[0]) if titles else ""

    return PageStructure(
        title=title,
        meta_description=_first_attribute(document, "//meta[@name='description']", "content"),
        canonical=_first_attribute(document, "//link[@rel='canonical']", "href"),
        headings=_extract_headings(document),
        links=_extract_links(document),
    )

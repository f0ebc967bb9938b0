"""URL and content-type checks shared by request validation and the fetcher."""

from urllib.parse import urlparse

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_http_url(value: str) -> bool:
    """Return True if *value* is an absolute http(s) URL with a host."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing .port validates the port component
        parsed.port  # noqa: B018
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


def is_html_content_type(content_type: str) -> bool:
    """Return True if a Content-Type header declares HTML or XHTML."""
    lowered = content_type.lower()
    return any(ct in lowered for ct in HTML_CONTENT_TYPES)

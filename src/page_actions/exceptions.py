"""Custom exceptions for Page Actions."""

from typing import Any


class PageActionsError(Exception):
    """Base exception for all Page Actions errors."""

    pass


# ─── Validation Errors ───────────────────────────────────────────


class ValidationError(PageActionsError):
    """Raised when request input is malformed or missing fields."""

    def __init__(self, details: dict[str, Any] | str) -> None:
        self.details = details
        super().__init__(f"Validation error: {details}")


class InvalidURLError(ValidationError):
    """Raised when a URL is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "Invalid URL format") -> None:
        self.url = url
        self.message = f"{reason}: {url}"
        super().__init__({"form_errors": [], "field_errors": {"url": [self.message]}})


class RequestTooLargeError(PageActionsError):
    """Raised when a request body exceeds the configured limit."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        super().__init__(f"Request body exceeds {limit_bytes} bytes")


# ─── Fetch Errors ────────────────────────────────────────────────


class FetchError(PageActionsError):
    """Base exception for page retrieval failures."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message
        super().__init__(f"[{url}] {message}")


class FetchConnectionError(FetchError):
    """Raised when the transport call fails (DNS, connection, TLS)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"Request failed: {reason}")


class FetchTimeoutError(FetchError):
    """Raised when a fetch exceeds its timeout."""

    def __init__(self, url: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(url, f"Fetch timed out after {timeout_seconds}s")


class FetchStatusError(FetchError):
    """Raised when the response status is outside the 2xx range."""

    def __init__(self, url: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(url, f"Fetch failed: {status_code}")


class UnsupportedContentTypeError(FetchError):
    """Raised when the response is neither HTML nor XHTML."""

    def __init__(self, url: str, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(url, f"Unsupported content-type: {content_type}")


class DocumentParseError(FetchError):
    """Raised when the HTML parser itself fails on a fetched document."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"Document could not be parsed: {reason}")


class BatchOrchestrationError(PageActionsError):
    """Raised when the batch scheduler itself fails."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ─── Auth Errors ─────────────────────────────────────────────────


class AuthError(PageActionsError):
    """Base exception for API key checks."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthNotConfiguredError(AuthError):
    """Raised when the server has no API key configured."""

    def __init__(self, setting: str = "ACTIONS_API_KEY") -> None:
        self.setting = setting
        super().__init__(f"Server missing {setting}")


class UnauthorizedError(AuthError):
    """Raised when the caller's API key is missing or wrong."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")


# ─── Provider Errors ─────────────────────────────────────────────


class ProviderError(PageActionsError):
    """Base exception for search provider errors."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.message = message
        super().__init__(f"[{provider}] {message}")


class ProviderNotConfiguredError(ProviderError):
    """Raised when a provider is not configured (missing API key)."""

    def __init__(self, provider: str, setting: str) -> None:
        self.setting = setting
        super().__init__(provider, f"Server missing {setting}")


class ProviderAPIError(ProviderError):
    """Raised when a provider API returns a non-success status."""

    def __init__(self, provider: str, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(provider, f"API error {status_code}: {message}")

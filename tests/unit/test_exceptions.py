"""Unit tests for custom exceptions."""

from page_actions import exceptions


def test_fetch_errors():
    err = exceptions.FetchStatusError("https://example.com", 404)
    assert err.status_code == 404
    assert err.message == "Fetch failed: 404"
    assert "https://example.com" in str(err)

    err = exceptions.UnsupportedContentTypeError("https://example.com", "application/json")
    assert err.content_type == "application/json"
    assert err.message == "Unsupported content-type: application/json"

    err = exceptions.FetchTimeoutError("https://example.com", 5)
    assert err.timeout_seconds == 5
    assert "timed out" in err.message

    err = exceptions.FetchConnectionError("https://example.com", "boom")
    assert err.message == "Request failed: boom"

    assert isinstance(exceptions.DocumentParseError("u", "x"), exceptions.FetchError)


def test_auth_errors():
    err = exceptions.AuthNotConfiguredError()
    assert err.message == "Server missing ACTIONS_API_KEY"

    err = exceptions.UnauthorizedError()
    assert err.message == "Unauthorized"
    assert isinstance(err, exceptions.AuthError)


def test_provider_errors():
    err = exceptions.ProviderNotConfiguredError("serpapi", "SERPAPI_KEY")
    assert err.message == "Server missing SERPAPI_KEY"
    assert "serpapi" in str(err)

    err = exceptions.ProviderAPIError("serpapi", 403, "Forbidden")
    assert err.status_code == 403
    assert "API error 403" in str(err)


def test_validation_errors():
    err = exceptions.InvalidURLError("not a url")
    assert err.url == "not a url"
    assert err.details["field_errors"]["url"] == ["Invalid URL format: not a url"]
    assert isinstance(err, exceptions.ValidationError)

    err = exceptions.RequestTooLargeError(1024)
    assert err.limit_bytes == 1024
    assert "1024" in str(err)

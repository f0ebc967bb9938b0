"""Static API-key authorization for the action endpoints."""

import functools
import hmac
from collections.abc import Awaitable, Callable

import structlog
from starlette.requests import Request
from starlette.responses import Response

from page_actions.exceptions import AuthNotConfiguredError, UnauthorizedError

logger = structlog.get_logger(__name__)

API_KEY_HEADER = "X-API-KEY"

Endpoint = Callable[[Request], Awaitable[Response]]


class ApiKeyAuthorizer:
    """Checks the caller's ``X-API-KEY`` header against the configured key."""

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key

    def authorize(self, request: Request) -> None:
        """
        Allow the request or raise.

        Raises:
            AuthNotConfiguredError: If the server has no key configured
            UnauthorizedError: If the header is missing or does not match
        """
        if not self._api_key:
            logger.error("api_key_not_configured", path=request.url.path)
            raise AuthNotConfiguredError()

        supplied = request.headers.get(API_KEY_HEADER)
        if not supplied or not hmac.compare_digest(supplied.encode(), self._api_key.encode()):
            logger.info("unauthorized_request", path=request.url.path)
            raise UnauthorizedError()


def require_api_key(endpoint: Endpoint) -> Endpoint:
    """Run the application's authorizer before *endpoint*."""

    @functools.wraps(endpoint)
    async def wrapper(request: Request) -> Response:
        request.app.state.context.authorizer.authorize(request)
        return await endpoint(request)

    return wrapper

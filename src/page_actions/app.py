"""
Starlette ASGI application for the Page Actions API.

All endpoints except ``/`` and ``/health`` require the ``X-API-KEY`` header.
"""

import contextlib
from collections.abc import AsyncIterator

import structlog
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from page_actions import __version__
from page_actions.config import Settings, get_settings
from page_actions.exceptions import (
    AuthError,
    AuthNotConfiguredError,
    BatchOrchestrationError,
    FetchError,
    ProviderAPIError,
    ProviderError,
    ProviderNotConfiguredError,
    RequestTooLargeError,
    ValidationError,
)
from page_actions.routes import build_routes
from page_actions.server import app_lifespan

logger = structlog.get_logger(__name__)


async def health_check(_request: Request) -> JSONResponse:
    """Liveness check, no dependencies touched."""
    return JSONResponse({"ok": True})


async def root(_request: Request) -> JSONResponse:
    """Root endpoint with server information."""
    return JSONResponse(
        {
            "name": "Page Actions",
            "version": __version__,
            "description": "Fetch and extract web pages, proxy Google search",
            "endpoints": {
                "health": "/health",
                "fetch": "/page/fetch",
                "extract": "/page/extract",
                "extract_batch": "/page/extract_batch",
                "serp": "/serp/google",
            },
        }
    )


# ─── Exception Handlers ──────────────────────────────────────────


async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse({"error": exc.details}, status_code=400)


async def request_too_large_handler(_request: Request, exc: RequestTooLargeError) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=413)


async def auth_error_handler(_request: Request, exc: AuthError) -> JSONResponse:
    status_code = 500 if isinstance(exc, AuthNotConfiguredError) else 401
    return JSONResponse({"error": exc.message}, status_code=status_code)


async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.info("fetch_failed", path=request.url.path, url=exc.url, error=exc.message)
    return JSONResponse({"error": exc.message}, status_code=502)


async def batch_error_handler(_request: Request, exc: BatchOrchestrationError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=502)


async def provider_error_handler(_request: Request, exc: ProviderError) -> JSONResponse:
    if isinstance(exc, ProviderNotConfiguredError):
        return JSONResponse({"error": exc.message}, status_code=500)
    if isinstance(exc, ProviderAPIError):
        logger.warning("provider_api_error", provider=exc.provider, status_code=exc.status_code)
        return JSONResponse(
            {"error": "SerpApi request failed", "status": exc.status_code},
            status_code=502,
        )
    logger.warning("provider_error", provider=exc.provider, error=exc.message)
    return JSONResponse({"error": "SerpApi request failed"}, status_code=502)


exception_handlers = {
    ValidationError: validation_error_handler,
    RequestTooLargeError: request_too_large_handler,
    AuthError: auth_error_handler,
    FetchError: fetch_error_handler,
    BatchOrchestrationError: batch_error_handler,
    ProviderError: provider_error_handler,
}


def create_app(settings: Settings | None = None) -> Starlette:
    """
    Build the Starlette application.

    Args:
        settings: Application settings; read from the environment when omitted

    Returns:
        Configured ASGI application
    """
    settings = settings or get_settings()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        """
        Application lifespan manager.

        Initializes shared resources on startup, cleans up on shutdown.
        """
        logger.info(
            "starting_http_server",
            host=settings.host,
            port=settings.port,
            debug=settings.debug,
        )
        async with app_lifespan(settings) as context:
            app.state.context = context
            yield
        logger.info("http_server_shutdown")

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=settings.get_cors_origins(),
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        ),
    ]

    return Starlette(
        debug=settings.debug,
        routes=[
            Route("/", root, methods=["GET"]),
            Route("/health", health_check, methods=["GET"]),
            *build_routes(),
        ],
        middleware=middleware,
        exception_handlers=exception_handlers,
        lifespan=lifespan,
    )

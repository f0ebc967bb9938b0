"""Page fetch and extraction endpoints."""

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from page_actions.auth import require_api_key
from page_actions.models.page import BatchExtractRequest, PageRequest
from page_actions.routes.parsing import parse_body
from page_actions.server import AppContext


@require_api_key
async def fetch_page(request: Request) -> JSONResponse:
    """
    POST /page/fetch

    Body ``{url}``; returns ``{url, html}``.
    """
    app_ctx: AppContext = request.app.state.context
    body = await parse_body(request, PageRequest)

    fetched = await app_ctx.page_extractor.fetch(body.url)

    return JSONResponse({"url": body.url, "html": fetched.html})


@require_api_key
async def extract_page(request: Request) -> JSONResponse:
    """
    POST /page/extract

    Body ``{url}``; returns the extraction record.
    """
    app_ctx: AppContext = request.app.state.context
    body = await parse_body(request, PageRequest)

    record = await app_ctx.page_extractor.extract(body.url)

    return JSONResponse(record.model_dump())


@require_api_key
async def extract_batch(request: Request) -> JSONResponse:
    """
    POST /page/extract_batch

    Body ``{urls, concurrency?}``; returns ``{results}`` in input order.
    Per-URL failures are reported inside ``results``.
    """
    app_ctx: AppContext = request.app.state.context
    body = await parse_body(request, BatchExtractRequest)

    batch = await app_ctx.batch_extractor.extract_batch(body.urls, body.concurrency)

    return JSONResponse(batch.model_dump())


routes = [
    Route("/page/fetch", fetch_page, methods=["POST"]),
    Route("/page/extract", extract_page, methods=["POST"]),
    Route("/page/extract_batch", extract_batch, methods=["POST"]),
]

"""Google search proxy endpoint."""

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from page_actions.auth import require_api_key
from page_actions.models.search import SerpQuery
from page_actions.routes.parsing import parse_body
from page_actions.server import AppContext


@require_api_key
async def google_search(request: Request) -> JSONResponse:
    """
    POST /serp/google

    Body ``{q, location?, hl?, gl?, num?}``; returns the slimmed SerpAPI payload.
    """
    app_ctx: AppContext = request.app.state.context
    query = await parse_body(request, SerpQuery)

    payload = await app_ctx.serp_provider.search(query)

    return JSONResponse(payload)


routes = [
    Route("/serp/google", google_search, methods=["POST"]),
]

"""HTTP routes for Page Actions."""

from starlette.routing import Route


def build_routes() -> list[Route]:
    """
    Collect the routes of every endpoint module.

    Returns:
        Routes for the page and search endpoints
    """
    from page_actions.routes import page, search

    return [*page.routes, *search.routes]

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse

from pageshell.errors import ContextWiringError
from pageshell.middleware import has_page_context
from pageshell.rendering import render_partial

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def view_index(request: Request) -> HTMLResponse:
    settings = request.app.state.settings
    templates = request.app.state.templates
    partial = render_partial(templates, "table.html", numbers=list(range(settings.page_numbers)))
    return partial.to_response(request, templates)


def mount_pages(app: FastAPI, pages: APIRouter = router) -> None:
    """Include a router whose pages need the PageContext; refuses unless the middleware is installed."""

    if not has_page_context(app):
        raise ContextWiringError("AppendContextMiddleware must be installed before mounting page routes")
    app.include_router(pages)

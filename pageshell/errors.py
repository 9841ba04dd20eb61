"""Page rendering failures and their HTTP mapping."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse


class PageError(Exception):
    """Server-side page failure with a fixed, client-safe detail."""

    detail: str = "Internal server error"
    status_code: int = 500

    def __init__(self, *, cause: Exception | None = None) -> None:
        super().__init__(self.detail)
        self.cause = cause


class TemplateRenderError(PageError):
    """Inner or outer template failed to render."""

    detail = "Template parsing error"


class MissingContextError(PageError):
    """The page context was never stamped onto the request."""

    detail = "Failed to pass context to container template"


class ContextWiringError(RuntimeError):
    """A context-dependent router was mounted without the context middleware."""


async def _page_error_handler(request: Request, exc: PageError) -> PlainTextResponse:
    structlog.get_logger("pages").error(
        "page_render_failed",
        error=type(exc).__name__,
        cause=repr(exc.cause) if exc.cause is not None else None,
        exc_info=exc,
    )
    # Only the fixed detail reaches the client.
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PageError, _page_error_handler)  # type: ignore[arg-type]

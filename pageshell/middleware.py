from __future__ import annotations

from typing import Any, Callable

import structlog
from fastapi import FastAPI
from starlette.datastructures import MutableHeaders

from pageshell.config import get_settings
from pageshell.context import PAGE_CONTEXT_KEY, PageContext


class _ResponseTap:
    """Wraps ``send``: tags the response with the request id and remembers its status."""

    def __init__(self, send: Callable[..., Any], ctx: PageContext) -> None:
        self._send = send
        self._ctx = ctx
        self.status_code: int | None = None

    async def __call__(self, message: dict[str, Any]) -> None:
        if message.get("type") == "http.response.start":
            self.status_code = int(message["status"])
            MutableHeaders(scope=message).append("X-Request-ID", self._ctx.request_id)
        await self._send(message)


class AppendContextMiddleware:
    """Stamps a PageContext onto each HTTP request before the app sees it.

    The request id is also bound into structlog's contextvars for the duration
    of the request, and one access event is logged when it finishes.
    """

    def __init__(self, app: Callable[..., Any], secret_word: str | None = None) -> None:
        self.app = app
        self.secret_word = secret_word if secret_word is not None else get_settings().secret_word

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        ctx = PageContext.stamp(secret_word=self.secret_word)
        scope.setdefault("state", {})[PAGE_CONTEXT_KEY] = ctx
        tap = _ResponseTap(send, ctx)

        with structlog.contextvars.bound_contextvars(
            request_id=ctx.request_id,
            path=scope.get("path"),
            method=scope.get("method"),
        ):
            try:
                await self.app(scope, receive, tap)
            except Exception:
                structlog.get_logger("access").exception(
                    "http_request_failed", status_code=tap.status_code, elapsed_us=ctx.request_time()
                )
                raise
            structlog.get_logger("access").info(
                "http_request", status_code=tap.status_code, elapsed_us=ctx.request_time()
            )


def install_page_context(app: FastAPI, secret_word: str | None = None) -> None:
    app.add_middleware(AppendContextMiddleware, secret_word=secret_word)


def has_page_context(app: FastAPI) -> bool:
    return any(m.cls is AppendContextMiddleware for m in app.user_middleware)

"""PageContext: per-request values shared with the outer page shell."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from time import perf_counter

from starlette.requests import Request

from pageshell.errors import MissingContextError

# Slot in the request's scope state; holds at most one PageContext.
PAGE_CONTEXT_KEY = "page_context"


@dataclass(frozen=True)
class PageContext:
    """Created once per request by the context middleware, read-only afterwards."""

    request_start: float
    secret_word: str
    request_id: str

    @classmethod
    def stamp(cls, secret_word: str, request_id: str | None = None) -> PageContext:
        return cls(
            request_start=perf_counter(),
            secret_word=secret_word,
            request_id=request_id or str(uuid.uuid4()),
        )

    def request_time(self) -> int:
        """Microseconds elapsed since the request was stamped."""
        return max(0, int((perf_counter() - self.request_start) * 1_000_000))


def get_page_context(request: Request) -> PageContext:
    """Return the request's PageContext; usable as a FastAPI dependency."""

    ctx = request.scope.get("state", {}).get(PAGE_CONTEXT_KEY)
    if not isinstance(ctx, PageContext):
        raise MissingContextError()
    return ctx

"""Two-step page rendering: an inner partial, then the shared outer shell.

Handlers render their own fragment with ``render_partial`` and hand the result
to ``compose_response``. The shell pulls the PageContext from the request, so
handler signatures never need to carry it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from pageshell.context import get_page_context
from pageshell.errors import TemplateRenderError

DEFAULT_SHELL = "public.html"


def build_templates(directory: str | Path) -> Jinja2Templates:
    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "xml"]),
        # Missing bindings must fail the render rather than print blanks.
        undefined=StrictUndefined,
    )
    return Jinja2Templates(env=env)


def _render(templates: Jinja2Templates, name: str, bindings: dict[str, Any]) -> str:
    try:
        template = templates.get_template(name)
    except TemplateError as exc:
        raise TemplateRenderError(cause=exc) from exc

    try:
        return template.render(**bindings)
    except Exception as exc:
        # Bad binding types surface as TypeError/AttributeError, not TemplateError.
        raise TemplateRenderError(cause=exc) from exc


@dataclass(frozen=True)
class PartialContent:
    """Rendered inner fragment, unaware of the page around it."""

    content: str

    def to_response(self, request: Request, templates: Jinja2Templates) -> HTMLResponse:
        return compose_response(request, self, templates)


def render_partial(templates: Jinja2Templates, name: str, **bindings: Any) -> PartialContent:
    return PartialContent(content=_render(templates, name, bindings))


def compose_response(
    request: Request,
    partial: PartialContent,
    templates: Jinja2Templates,
    shell: str = DEFAULT_SHELL,
) -> HTMLResponse:
    """Wrap ``partial`` in the outer shell using the request's PageContext.

    Raises MissingContextError when the context middleware did not run for
    this request, and TemplateRenderError when the shell fails to render.
    """
    ctx = get_page_context(request)
    body = _render(templates, shell, {"context": ctx, "content": partial.content})
    return HTMLResponse(body, status_code=200)

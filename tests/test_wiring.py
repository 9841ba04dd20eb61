import pytest
from fastapi import FastAPI

from pageshell.errors import ContextWiringError
from pageshell.middleware import AppendContextMiddleware, has_page_context, install_page_context
from pageshell.pages import mount_pages


def test_mount_pages_refuses_app_without_context_middleware() -> None:
    app = FastAPI()
    with pytest.raises(ContextWiringError):
        mount_pages(app)
    assert all(getattr(route, "path", None) != "/" for route in app.routes)


def test_mount_pages_after_install_registers_index() -> None:
    app = FastAPI()
    install_page_context(app, secret_word="x")
    assert has_page_context(app)

    mount_pages(app)
    assert any(getattr(route, "path", None) == "/" for route in app.routes)


def test_has_page_context_ignores_other_middleware() -> None:
    from starlette.middleware.gzip import GZipMiddleware

    app = FastAPI()
    app.add_middleware(GZipMiddleware)
    assert not has_page_context(app)

    app.add_middleware(AppendContextMiddleware, secret_word="x")
    assert has_page_context(app)


def test_create_app_is_wired(app) -> None:
    assert has_page_context(app)
    assert any(getattr(route, "path", None) == "/" for route in app.routes)

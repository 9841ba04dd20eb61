from fastapi import FastAPI

from pageshell.config import Settings, get_settings
from pageshell.errors import register_error_handlers
from pageshell.middleware import install_page_context
from pageshell.pages import mount_pages
from pageshell.rendering import build_templates


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Page Shell", version="0.1.0")
    app.state.settings = settings
    app.state.templates = build_templates(settings.templates_path)
    register_error_handlers(app)
    install_page_context(app, secret_word=settings.secret_word)
    mount_pages(app)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()

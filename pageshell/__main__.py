from __future__ import annotations

import argparse

import uvicorn

from pageshell.config import get_settings
from pageshell.observability.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the page shell over HTTP")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind")
    parser.add_argument("--log-level", default=settings.log_level, help="Root log level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    from pageshell.main import app

    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()

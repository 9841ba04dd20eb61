from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from pageshell.config import get_settings


_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str | None = None, json_logs: bool | None = None) -> None:
    """Route structlog and stdlib records through one stdout handler.

    Renders JSON by default, or coloured console lines when ``json_logs`` is
    false. Only the first call has any effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = _resolve_level(level)
    if json_logs is None:
        json_logs = get_settings().log_json

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        shared.append(structlog.processors.format_exc_info)
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    for name in ("uvicorn", "uvicorn.error"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.propagate = False
        logger.setLevel(numeric_level)

    # AppendContextMiddleware already emits one http_request event per request.
    access = logging.getLogger("uvicorn.access")
    access.handlers = []
    access.propagate = False
    access.disabled = True

    _CONFIGURED = True

"""
Structured logging with structlog.

``configure_logging`` is called once by the application factory; modules
obtain loggers through ``get_logger(__name__)``. The request id of the
current request lives in structlog's context vars, so every event logged
while handling a request carries it automatically.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Optional

import structlog
from structlog.types import Processor


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Route structlog through the stdlib root logger with a JSON or console renderer."""
    logging_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging_level)
    root_logger.addHandler(handler)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_id(request_id: Optional[str] = None) -> str:
    """Bind a request id (generated when missing) to the logging context."""
    if not request_id:
        request_id = f"req-{uuid.uuid4().hex[:12]}"
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id


def clear_request_id() -> None:
    structlog.contextvars.unbind_contextvars("request_id")

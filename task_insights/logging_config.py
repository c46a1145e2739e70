"""structlog configuration.

``dev`` renders readable console lines, ``json`` renders one JSON object
per event. Both are selected through ``TASK_INSIGHTS_LOG_FORMAT``.
"""

from __future__ import annotations

import logging
import os

import structlog


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """Configure structlog on top of the standard library root logger."""

    log_format = log_format or os.environ.get("TASK_INSIGHTS_LOG_FORMAT", "dev")
    log_level = log_level or os.environ.get("TASK_INSIGHTS_LOG_LEVEL", "INFO")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(logger=None, **context):
    """Return ``logger`` or the module-level structlog logger, bound to ``context``."""

    base = logger if logger is not None else structlog.get_logger("task_insights")
    return base.bind(**context) if context else base

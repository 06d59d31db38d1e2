"""
structlog setup shared by the CLI.

- configure_logging(): processors, level filter and renderer; binds run_id
- get_logger(): named logger, e.g. get_logger("cli")
"""

from __future__ import annotations

import logging
import sys
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import FilteringBoundLogger, Processor


def configure_logging(level: str = "WARNING", json_output: bool = False) -> str:
    """
    Configure structlog and return a fresh run id bound into the context.

    :param level: stdlib level name, DEBUG..CRITICAL
    :param json_output: render JSON lines instead of the console format
    """
    level_no = logging.getLevelNamesMapping().get(level.upper())
    if level_no is None:
        raise ValueError(f"Unknown log level: {level!r}")

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        # stdout carries command output; logs go to stderr
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    run_id = uuid4().hex[:12]
    clear_contextvars()
    bind_contextvars(run_id=run_id)
    return run_id


def get_logger(name: str) -> FilteringBoundLogger:
    logger: FilteringBoundLogger = structlog.get_logger(name).bind(logger=name)
    return logger


__all__ = ["configure_logging", "get_logger"]

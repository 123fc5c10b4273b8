"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Any, Generator

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def _render_enums(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Replace enum values (e.g. SubsetType) by their plain value."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def setup_logging(level: str = "INFO", log_format: str = "json") -> None:
    """Set up structured logging with structlog."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _render_enums,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors: list[Processor] = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a bound logger instance."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


@contextmanager
def reconcile_log_context(deployment: str, subset_type: str) -> Generator[None, None, None]:
    """Bind the deployment key and active subset type for one reconcile pass.

    Every log line emitted inside the block, from any module, carries both.
    """
    with structlog.contextvars.bound_contextvars(deployment=deployment, subset_type=subset_type):
        yield

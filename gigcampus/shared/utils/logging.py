"""Structured logging for the ranking engine, driven by ``RankingSettings``."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog

from gigcampus import __version__

if TYPE_CHECKING:
    from gigcampus.ranking.config import RankingSettings


def _processors(json_format: bool) -> list[structlog.types.Processor]:
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        return [*shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [*shared, structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(settings: RankingSettings | None = None) -> None:
    """
    Configure structlog from ranking settings.

    Reads ``log_level``, ``log_json`` and ``service_name`` from ``settings``
    (the cached ``RANKING_*`` environment settings when omitted) and binds the
    service name and engine version into every entry.

    Args:
        settings: Settings to apply; defaults to ``get_settings()``
    """
    if settings is None:
        from gigcampus.ranking.config import get_settings

        settings = get_settings()

    level = getattr(logging, settings.log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=_processors(settings.log_json),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=settings.service_name,
        engine_version=__version__,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, usually named after the calling module."""
    return structlog.get_logger(name)


def bind_user_context(user_id: str) -> None:
    """Bind the user being ranked to all subsequent log entries."""
    structlog.contextvars.bind_contextvars(user_id=user_id)


def clear_user_context() -> None:
    """Drop the binding added by `bind_user_context`."""
    structlog.contextvars.unbind_contextvars("user_id")


@contextmanager
def user_context(user_id: str) -> Iterator[None]:
    """Scope log entries to one user for the duration of a ranking operation."""
    bind_user_context(user_id)
    try:
        yield
    finally:
        clear_user_context()

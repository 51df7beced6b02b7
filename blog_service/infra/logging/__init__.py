"""Logging infrastructure.

    from blog_service.infra.logging import get_lazy_logger, set_log_context, setup_logging

    setup_logging()                       # once, at startup
    set_log_context(request_id="abc")     # per request
    get_lazy_logger(__name__).debug(lambda: f"expensive {value}")
"""

from __future__ import annotations

from blog_service.infra.logging.config import configure_logging, setup_logging, shutdown
from blog_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from blog_service.infra.logging.formatters import JSONFormatter
from blog_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]

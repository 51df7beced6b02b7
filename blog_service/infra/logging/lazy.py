"""Logger adapter whose messages and arguments may be callables.

The paginator and repositories log a summary of every page they read. Those
summaries are only built when DEBUG is enabled for the logger:

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"paginate: {store.scope} -> {len(nodes)} edges")
"""

from __future__ import annotations

import logging
from typing import Any


class LazyLoggerAdapter(logging.LoggerAdapter):
    # debug()/info()/warning()/error() on LoggerAdapter all funnel through log()
    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if not self.isEnabledFor(level):
            return
        if callable(msg):
            msg = msg()
        args = tuple(arg() if callable(arg) else arg for arg in args)
        super().log(level, msg, *args, **kwargs)


def get_lazy_logger(name: str, **context: Any) -> LazyLoggerAdapter:
    """Return a lazy adapter for `name`, binding `context` as extra fields."""
    return LazyLoggerAdapter(logging.getLogger(name), context)

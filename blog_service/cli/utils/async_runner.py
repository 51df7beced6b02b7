"""Run coroutine commands under click."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any


def coro[T](f: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """Wrap an ``async def`` command so click can call it synchronously.

    Each invocation gets its own event loop through ``asyncio.run``. Commands
    that touch the database close the engine before returning, because the
    pooled connections belong to that loop.
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return asyncio.run(f(*args, **kwargs))

    return wrapper

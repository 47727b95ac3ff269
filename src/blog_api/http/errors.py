"""
Error logging for resource accessors.
"""

import functools
import logging
from typing import Awaitable, Callable, TypeVar

from .client import RequestError


T = TypeVar("T")


def logs_request_errors(
    message: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Log a RequestError raised by the wrapped coroutine, then re-raise it.

    The record goes to the logger of the module defining the wrapped
    function, so each resource keeps its own logger name.

    Args:
        message: Diagnostic prefix, e.g. "Error fetching posts".
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except RequestError as e:
                logger.error(f"{message}: {e}")
                raise

        return wrapper

    return decorator

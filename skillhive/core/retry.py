"""
Retry logic for the data-access boundary.

- Exponential backoff
- Retries only errors flagged as retryable
"""

from typing import TypeVar, Callable, Any, Awaitable
from functools import wraps
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
    before_sleep_log,
)
import logging

from skillhive.core.errors import SkillhiveError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_retryable_error(exception: BaseException) -> bool:
    """
    Decide whether an exception is worth retrying

    Args:
        exception: The raised exception

    Returns:
        True if the error is retryable
    """
    if isinstance(exception, SkillhiveError):
        return exception.retryable
    return False


def with_retry(
    max_attempts: int = 3,
    min_wait_seconds: float = 0.1,
    max_wait_seconds: float = 2.0,
    log_level: int = logging.WARNING,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Retry decorator for coroutine functions

    Args:
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum backoff (seconds)
        max_wait_seconds: Maximum backoff (seconds)
        log_level: Level used when logging a retry

    Usage:
        @with_retry(max_attempts=3)
        async def fetch_hackathons():
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @retry(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=min_wait_seconds, min=min_wait_seconds, max=max_wait_seconds),
            retry=retry_if_exception(is_retryable_error),
            before_sleep=before_sleep_log(logger, log_level),
            reraise=True,
        )
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await func(*args, **kwargs)

        return wrapper

    return decorator

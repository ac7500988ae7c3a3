"""Retry decorator for GitHub API calls that hit rate limits.

Release workflow steps run under a job timeout, so the defaults here are far
more conservative than a long-running sync job would use: a handful of
attempts, with the wait taken from the rate limit headers when GitHub sends
them and exponential backoff otherwise.
"""

import asyncio
import inspect
import functools
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def is_rate_limit_response(exc: RequestFailed) -> bool:
    """Return True if a failed request was rejected because of a rate limit."""
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    return status_code == 403 and "rate limit" in str(exc).lower()


def wait_time_from_headers(headers: Any, default: float) -> float:
    """Compute how long to wait from the retry-after or x-ratelimit-reset headers."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
            return default

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
            return default
        now = int(time.time())
        if reset_timestamp > now:
            return float(reset_timestamp - now + 1)
    return default


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 120.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls when they encounter rate limits.

    Args:
        max_retries: Maximum number of retry attempts after the first call.
        initial_delay: Delay in seconds used when GitHub gives no hint.
        max_delay: Upper bound for any single wait.
        exponential_base: Multiplier applied to the fallback delay after each attempt.

    Returns:
        Decorated coroutine function with retry logic.
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as exc:
                    if attempt >= max_retries:
                        logger.error("Max retries reached for GitHub rate limit", function=func.__name__, attempts=attempt + 1)
                        raise
                    retry_after = getattr(exc, "retry_after", None)
                    wait_time = retry_after.total_seconds() if retry_after else delay
                except RequestFailed as exc:
                    if not is_rate_limit_response(exc):
                        raise
                    if attempt >= max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit",
                            function=func.__name__,
                            attempts=attempt + 1,
                            status_code=exc.response.status_code,
                        )
                        raise
                    wait_time = wait_time_from_headers(exc.response.headers, delay)

                wait_time = min(wait_time, max_delay)
                logger.warning(
                    f"GitHub rate limit hit, retrying in {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)
                attempt += 1

        return wrapper  # type: ignore

    return decorator

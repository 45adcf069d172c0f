from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_SECONDS = 1.0


def backoff_delay(attempt: int, base_delay: float = DEFAULT_BASE_DELAY_SECONDS) -> float:
    """Delay before 0-based attempt `attempt`; 1s base gives 2s, 4s, 8s."""
    return base_delay * 2**attempt


async def retry_with_backoff(
    fn: Callable[[], Awaitable[T]],
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY_SECONDS,
    should_retry: Callable[[Exception], bool] | None = None,
    on_retry: Callable[[int, float, Exception], None] | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run `fn` until it succeeds or `max_retries` retries are used up.

    Only one attempt is in flight at a time. The last error is re-raised
    unchanged once retries are exhausted or `should_retry` declines it.
    """
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            if attempt >= max_retries or (should_retry is not None and not should_retry(exc)):
                raise
            attempt += 1
            delay = backoff_delay(attempt, base_delay)
            logger.info(
                "attempt failed, retrying",
                extra={"attempt": attempt, "delay_seconds": delay, "error_type": type(exc).__name__},
            )
            if on_retry is not None:
                on_retry(attempt, delay, exc)
            await sleep(delay)

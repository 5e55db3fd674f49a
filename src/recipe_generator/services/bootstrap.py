"""Startup helpers for waiting on the database."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_backoff(  # noqa: PLR0913
    operation: Callable[[], T],
    *,
    action: str,
    attempts: int = 5,
    base_delay_seconds: float = 1.0,
    max_delay_seconds: float = 10.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run a blocking operation, retrying with exponential backoff.

    The delay after failed attempt ``n`` is ``base * 2**n`` capped at
    ``max_delay_seconds``. The last failure is re-raised as a RuntimeError.
    """
    attempt = 1
    while True:
        _logger.info("Attempting %s (attempt %s/%s)", action, attempt, attempts)
        try:
            return operation()
        except Exception as exc:
            _logger.warning("%s attempt %s failed: %s", action, attempt, exc)
            if attempt >= attempts:
                raise RuntimeError(
                    f"Failed {action} after {attempts} attempts: {exc}"
                ) from exc
            delay = min(base_delay_seconds * 2**attempt, max_delay_seconds)
            _logger.info("Waiting %.1fs before next attempt", delay)
            await sleep(delay)
            attempt += 1

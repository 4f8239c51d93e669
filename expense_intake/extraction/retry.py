"""Bounded retry for calls to external providers."""

import time
from collections.abc import Callable
from typing import TypeVar

from expense_intake.logging.logger import Log

T = TypeVar("T")


def linear_backoff(base_delay_seconds: float) -> Callable[[int], float]:
    """Delay of ``attempt * base_delay_seconds`` after the given failed attempt."""
    return lambda attempt: attempt * base_delay_seconds


def with_retry(
    fn: Callable[[], T],
    *,
    attempts: int,
    delay: Callable[[int], float],
    is_retryable: Callable[[Exception], bool],
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call ``fn`` until it succeeds or ``attempts`` calls have been made.

    Only exceptions accepted by ``is_retryable`` trigger another attempt;
    anything else propagates immediately. When the last attempt fails its
    exception propagates unchanged.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")

    attempt = 1
    while True:
        try:
            return fn()
        except Exception as exc:
            if attempt >= attempts or not is_retryable(exc):
                raise
            wait = delay(attempt)
            Log.warning(
                f"Attempt {attempt}/{attempts} failed: {exc}; retrying in {wait:.2f}s"
            )
            sleep(wait)
            attempt += 1

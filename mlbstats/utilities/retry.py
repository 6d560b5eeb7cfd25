"""Retry with exponential backoff.

Wraps upstream HTTP calls only. Cache operations are never retried.
"""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RETRIES = 3
DEFAULT_DELAY = 1.0  # seconds
BACKOFF_FACTOR = 1.5


def with_retry(
    fn: Callable[[], T],
    retries: int = DEFAULT_RETRIES,
    delay: float = DEFAULT_DELAY,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    backoff: float = BACKOFF_FACTOR,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call fn, retrying on error with exponential backoff.

    The first call is not counted as a retry, so fn runs at most
    retries + 1 times. After each failure the delay is multiplied by
    backoff (1s, 1.5s, 2.25s...). When retries are exhausted the last
    error is re-raised.

    Args:
        fn: Zero-argument callable to run
        retries: Number of retries after the first attempt
        delay: Seconds to wait before the first retry
        retry_on: Exception types that trigger a retry; others propagate at once
        backoff: Delay multiplier applied after every retry
        sleep: Sleep function (injectable for tests)

    Returns:
        Whatever fn returns
    """
    while True:
        try:
            return fn()
        except retry_on as e:
            if retries <= 0:
                raise
            logger.info(
                "[RETRY] Call failed (%s). Retrying in %.2fs (%d attempts left)",
                e,
                delay,
                retries,
            )
            sleep(delay)
            retries -= 1
            delay *= backoff

"""Retry logic using tenacity library.

Provides exponential backoff with jitter for flaky subprocess calls.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from typing import TypeVar

from tenacity import (
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity import (
    retry as _retry,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


def retry_with_backoff(
    *,
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    jitter: float = 1.0,
    retry_exceptions: tuple[type[BaseException], ...] = (Exception,),
    logger_instance: logging.Logger | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Retry decorator with exponential backoff and jitter.

    Args:
        max_retries: Number of retries AFTER the first attempt (total = max_retries + 1)
        base_delay: Initial delay in seconds
        max_delay: Maximum delay in seconds
        jitter: Maximum random jitter added to each delay, in seconds
        retry_exceptions: Tuple of exception types to retry on
        logger_instance: Logger for retry warnings (uses module logger if None)

    Returns:
        Decorator function; the last exception is re-raised once retries run out

    Example:
        @retry_with_backoff(max_retries=2, retry_exceptions=SUBPROCESS_EXCEPTIONS)
        def probe() -> subprocess.CompletedProcess[str]:
            return subprocess.run(cmd, check=True, timeout=60)
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    log = logger_instance or logger

    return _retry(
        reraise=True,
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_exponential_jitter(initial=base_delay, max=max_delay, jitter=jitter),
        retry=retry_if_exception_type(retry_exceptions),
        before_sleep=before_sleep_log(log, logging.WARNING),
    )


class RetryableError(Exception):
    """Exception that explicitly indicates the operation should be retried.

    Use this to wrap non-retryable exceptions when you want retry behavior.
    """

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


# Transient subprocess failures. A missing binary (FileNotFoundError) is not retried.
SUBPROCESS_EXCEPTIONS: tuple[type[Exception], ...] = (
    subprocess.TimeoutExpired,
    RetryableError,
)

"""Retry logic with exponential backoff for opening remote sources."""
import time
import logging
from typing import Callable, TypeVar, Optional
from functools import wraps

import requests

T = TypeVar("T")
logger = logging.getLogger(__name__)

DEFAULT_RETRYABLE_STATUS_CODES = [429, 500, 502, 503, 504]


def _is_retryable(exc: Exception, retryable_status_codes: list[int]) -> bool:
    """Decide whether an exception from a request is worth another attempt."""
    response = getattr(exc, "response", None)
    if response is not None and hasattr(response, "status_code"):
        return response.status_code in retryable_status_codes
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))


def retry_with_backoff(
    max_attempts: int = 3,
    initial_delay: float = 1.0,
    max_delay: float = 60.0,
    backoff_multiplier: float = 2.0,
    retryable_status_codes: Optional[list[int]] = None,
):
    """
    Decorator for retrying function calls with exponential backoff.

    Retries HTTP errors whose status is in ``retryable_status_codes`` and
    connection/timeout errors. Anything else is re-raised at once.

    Args:
        max_attempts: Maximum number of attempts (default: 3)
        initial_delay: Initial delay in seconds (default: 1.0)
        max_delay: Maximum delay in seconds (default: 60.0)
        backoff_multiplier: Multiplier for exponential backoff (default: 2.0)
        retryable_status_codes: HTTP status codes to retry (default: [429, 500, 502, 503, 504])

    Returns:
        Decorated function
    """
    if retryable_status_codes is None:
        retryable_status_codes = DEFAULT_RETRYABLE_STATUS_CODES

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            delay = initial_delay

            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if not _is_retryable(e, retryable_status_codes):
                        logger.error(f"Non-retryable error in {func.__name__}: {e}")
                        raise

                    logger.warning(
                        f"Retryable error on attempt {attempt}/{max_attempts} "
                        f"for {func.__name__}: {e}"
                    )
                    if attempt >= max_attempts:
                        raise

                    logger.info(
                        f"Retrying {func.__name__} after {delay:.1f}s "
                        f"(attempt {attempt + 1}/{max_attempts})"
                    )
                    time.sleep(delay)
                    delay = min(delay * backoff_multiplier, max_delay)

            raise RuntimeError(f"Failed after {max_attempts} attempts")

        return wrapper
    return decorator

"""Retry policy shared by the AI advisors."""

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from nutrisync.domain.calorie_plan.core.exceptions import ApiError, NetworkError


def is_transient(exc: BaseException) -> bool:
    """Network failures, 429 and 5xx are worth retrying."""
    if isinstance(exc, NetworkError):
        return True
    return isinstance(exc, ApiError) and exc.is_transient


def build_retrying(
    max_attempts: int = 3,
    backoff_multiplier: float = 1.0,
    backoff_min_s: float = 2.0,
    backoff_max_s: float = 10.0,
) -> AsyncRetrying:
    """Exponential backoff on transient errors; the last error is re-raised."""
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=backoff_multiplier, min=backoff_min_s, max=backoff_max_s
        ),
        retry=retry_if_exception(is_transient),
        reraise=True,
    )

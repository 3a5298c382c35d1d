"""Shared retry utilities using tenacity."""

from dataclasses import dataclass

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_random_exponential,
)
from tenacity.stop import stop_base


@dataclass
class ConflictRetryConfig:
    """Configuration for retrying optimistic writes that lost a race.

    Waits are jittered so that callers colliding on the same record
    spread out instead of colliding again on the next attempt. Retrying
    stops at ``max_attempts`` or once ``max_delay`` seconds have passed
    since the first attempt, whichever comes first.
    """

    max_attempts: int = 100
    multiplier: float = 0.01
    max_wait: float = 0.25
    max_delay: float | None = 20.0


def conflict_stop(config: ConflictRetryConfig) -> stop_base:
    """Stop condition for a conflict retry loop."""
    stop: stop_base = stop_after_attempt(config.max_attempts)
    if config.max_delay is not None:
        stop = stop | stop_after_delay(config.max_delay)
    return stop


def get_conflict_retrying(
    *exception_types: type[BaseException],
    config: ConflictRetryConfig | None = None,
) -> AsyncRetrying:
    """Get configured AsyncRetrying for conflict exceptions.

    Usage:
        async for attempt in get_conflict_retrying(SequenceConflict):
            with attempt:
                value = await try_increment()

    Args:
        exception_types: Exceptions that mean "lost the race, try again".
        config: Optional retry configuration. Uses defaults if not provided.

    Returns:
        AsyncRetrying instance that re-raises the last conflict once the budget is spent.
    """
    if not exception_types:
        raise TypeError("At least one exception type must be given")
    cfg = config or ConflictRetryConfig()
    return AsyncRetrying(
        retry=retry_if_exception_type(exception_types),
        stop=conflict_stop(cfg),
        wait=wait_random_exponential(multiplier=cfg.multiplier, max=cfg.max_wait),
        reraise=True,
    )

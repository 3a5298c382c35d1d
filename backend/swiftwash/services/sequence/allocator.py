"""Daily per-city sequence allocation.

Allocation is an optimistic read-increment-write against a counter store:

    read counter (absent -> 0) -> value + 1 -> compare-and-set

A lost compare-and-set means another caller got in first; that is routine
under load and retried with jittered backoff. Two callers can never both
win the same value because the conditional write only succeeds for one of
them. There is no in-process lock: callers may run in different processes.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from swiftwash.config import settings
from swiftwash.services.sequence.exceptions import AllocationFailed, SequenceConflict
from swiftwash.services.sequence.store import CounterKey, CounterStore
from swiftwash.utils.datetime_utils import utc_now
from swiftwash.utils.retry import ConflictRetryConfig, get_conflict_retrying

logger = structlog.get_logger(__name__)

SEQUENCE_WIDTH = 3


def format_sequence(value: int) -> str:
    """Zero-pad a sequence number to 3 digits.

    Values of 1000 and above keep all their digits.
    """
    return f"{value:0{SEQUENCE_WIDTH}d}"


def retry_config_from_settings() -> ConflictRetryConfig:
    """Retry configuration for counter conflicts from application settings."""
    return ConflictRetryConfig(
        max_attempts=settings.sequence_max_attempts,
        multiplier=settings.sequence_retry_multiplier,
        max_wait=settings.sequence_retry_max_wait,
        max_delay=settings.sequence_retry_timeout,
    )


class SequenceAllocator:
    """Issues the next number of a (city, day) series.

    Usage:
        allocator = SequenceAllocator(SqlCounterStore(async_session_maker))
        sequence = await allocator.next_sequence("NGP", "260117")  # "001"
    """

    def __init__(self, store: CounterStore, retry_config: ConflictRetryConfig | None = None):
        self.store = store
        self.retry_config = retry_config or retry_config_from_settings()

    async def next_value(self, city_code: str, date_key: str) -> int:
        """Atomically increment the counter and return the new value.

        Raises:
            AllocationFailed: Store unreachable or conflicts persisted past
                the configured number of attempts.
        """
        counter = CounterKey(city_code=city_code, date_key=date_key)
        value = 0
        attempts = 0

        try:
            async for attempt in get_conflict_retrying(SequenceConflict, config=self.retry_config):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    value = await self._try_increment(counter, attempts)
        except SequenceConflict as e:
            logger.error(
                "Sequence allocation retries exhausted",
                key=counter.key,
                attempts=attempts,
            )
            raise AllocationFailed(counter.key, f"conflicts persisted after {attempts} attempts") from e
        except (SQLAlchemyError, OSError) as e:
            logger.error("Counter store unavailable", key=counter.key, error=str(e))
            raise AllocationFailed(counter.key, "counter store unavailable") from e

        logger.info("Allocated sequence", key=counter.key, value=value, attempts=attempts)
        return value

    async def next_sequence(self, city_code: str, date_key: str) -> str:
        """Like :meth:`next_value`, formatted as a zero-padded string."""
        return format_sequence(await self.next_value(city_code, date_key))

    async def _try_increment(self, counter: CounterKey, attempt_number: int) -> int:
        snapshot = await self.store.read(counter)
        expected = snapshot.current_value if snapshot is not None else None
        new_value = (expected or 0) + 1

        if not await self.store.compare_and_set(counter, expected, new_value, utc_now()):
            logger.warning(
                "Counter conflict, retrying",
                key=counter.key,
                attempt=attempt_number,
                max_attempts=self.retry_config.max_attempts,
            )
            raise SequenceConflict(counter.key)

        return new_value

"""Counter stores backing the sequence allocator.

A store offers two operations on a keyed counter: read the current
record, and write a new value only if the counter still holds the value
that was read (compare-and-set). Atomicity of that conditional write is
the store's job; the allocator only retries when it reports a lost race.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

import structlog
from sqlalchemy import update
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swiftwash.models.order_counter import OrderCounter

logger = structlog.get_logger(__name__)

# Error fragments that mean "another transaction holds or changed the row"
_CONTENTION_MARKERS = (
    "database is locked",
    "could not obtain lock",
    "could not serialize",
    "deadlock detected",
    "lock not available",
)


@dataclass(frozen=True)
class CounterKey:
    """Identity of a daily city counter."""

    city_code: str
    date_key: str

    @property
    def key(self) -> str:
        return f"{self.city_code}-{self.date_key}"


@dataclass(frozen=True)
class CounterSnapshot:
    """Counter state as read from the store."""

    key: str
    current_value: int
    last_updated_at: datetime


class CounterStore(Protocol):
    """Storage contract for daily counters."""

    async def read(self, counter: CounterKey) -> CounterSnapshot | None:
        """Return the counter record, or None if it was never allocated."""
        ...

    async def compare_and_set(
        self,
        counter: CounterKey,
        expected: int | None,
        new_value: int,
        updated_at: datetime,
    ) -> bool:
        """Write ``new_value`` if the counter still holds ``expected``.

        ``expected=None`` means the record must not exist yet (create it).
        Returns False when the race was lost; nothing is written then.
        """
        ...


def is_contention_error(exc: BaseException) -> bool:
    """Whether a database error signals lock contention rather than an outage."""
    txt = str(exc).lower()
    return any(marker in txt for marker in _CONTENTION_MARKERS)


class SqlCounterStore:
    """Counter store on the ``order_counters`` table.

    Each operation runs in its own short transaction on a fresh session, so
    a committed allocation is independent of whatever request transaction
    the caller has open.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def read(self, counter: CounterKey) -> CounterSnapshot | None:
        async with self._session_maker() as session:
            record = await session.get(OrderCounter, counter.key)
            if record is None:
                return None
            return CounterSnapshot(
                key=record.key,
                current_value=record.current_value,
                last_updated_at=record.last_updated_at,
            )

    async def compare_and_set(
        self,
        counter: CounterKey,
        expected: int | None,
        new_value: int,
        updated_at: datetime,
    ) -> bool:
        async with self._session_maker() as session:
            try:
                if expected is None:
                    return await self._insert(session, counter, new_value, updated_at)
                return await self._update(session, counter, expected, new_value, updated_at)
            except (OperationalError, DBAPIError) as e:
                await session.rollback()
                if is_contention_error(e):
                    logger.debug("Counter row contended", key=counter.key, error=str(e))
                    return False
                raise

    async def _insert(
        self,
        session: AsyncSession,
        counter: CounterKey,
        new_value: int,
        updated_at: datetime,
    ) -> bool:
        session.add(
            OrderCounter(
                key=counter.key,
                city_code=counter.city_code,
                date_key=counter.date_key,
                current_value=new_value,
                last_updated_at=updated_at,
            )
        )
        try:
            await session.commit()
        except IntegrityError:
            # Someone else created the row first
            await session.rollback()
            return False
        return True

    async def _update(
        self,
        session: AsyncSession,
        counter: CounterKey,
        expected: int,
        new_value: int,
        updated_at: datetime,
    ) -> bool:
        stmt = (
            update(OrderCounter)
            .where(OrderCounter.key == counter.key)  # type: ignore[arg-type]
            .where(OrderCounter.current_value == expected)  # type: ignore[arg-type]
            .values(current_value=new_value, last_updated_at=updated_at)
        )
        result = await session.execute(stmt)
        await session.commit()
        return bool(result.rowcount == 1)  # type: ignore[attr-defined]


class InMemoryCounterStore:
    """Process-local counter store with the same compare-and-set contract.

    Suitable for a single process only (development, tests). Counters are
    lost on restart.
    """

    def __init__(self) -> None:
        self._records: dict[str, CounterSnapshot] = {}

    async def read(self, counter: CounterKey) -> CounterSnapshot | None:
        return self._records.get(counter.key)

    async def compare_and_set(
        self,
        counter: CounterKey,
        expected: int | None,
        new_value: int,
        updated_at: datetime,
    ) -> bool:
        current = self._records.get(counter.key)
        current_value = current.current_value if current is not None else None
        if current_value != expected:
            return False
        self._records[counter.key] = CounterSnapshot(
            key=counter.key,
            current_value=new_value,
            last_updated_at=updated_at,
        )
        return True

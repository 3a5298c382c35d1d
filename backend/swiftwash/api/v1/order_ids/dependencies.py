"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swiftwash.db import async_session_maker, get_session
from swiftwash.services.audit.audit_service import OrderIdAuditService
from swiftwash.services.order_ids.order_id_service import OrderIdService
from swiftwash.services.sequence.allocator import SequenceAllocator
from swiftwash.services.sequence.store import SqlCounterStore


def get_counter_session_maker() -> async_sessionmaker[AsyncSession]:
    """Session factory used by the counter store (separate from the request session)."""
    return async_session_maker


def get_sequence_allocator(
    session_maker: Annotated[async_sessionmaker[AsyncSession], Depends(get_counter_session_maker)],
) -> SequenceAllocator:
    """Get a SequenceAllocator backed by the order_counters table."""
    return SequenceAllocator(SqlCounterStore(session_maker))


async def get_order_id_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
) -> OrderIdService:
    """Get an OrderIdService instance with the current session."""
    return OrderIdService(session, allocator)


async def get_audit_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OrderIdAuditService:
    """Get an OrderIdAuditService instance with the current session."""
    return OrderIdAuditService(session)


# Type aliases for cleaner endpoint signatures
OrderIdServiceDep = Annotated[OrderIdService, Depends(get_order_id_service)]
AuditServiceDep = Annotated[OrderIdAuditService, Depends(get_audit_service)]

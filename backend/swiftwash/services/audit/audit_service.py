"""Append-only audit log of generated order IDs."""

from datetime import datetime
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from swiftwash.models.order_id_generation import OrderIdGeneration
from swiftwash.services.audit.exceptions import OrderIdNotFound
from swiftwash.services.geo.resolver import Address

logger = structlog.get_logger(__name__)


def address_location(address: Address) -> dict[str, Any]:
    """Location snapshot stored alongside each generated ID."""
    return {
        "latitude": address.latitude,
        "longitude": address.longitude,
        "postal_code": address.postal_code,
        "city_name": address.city_name,
    }


class OrderIdAuditService:
    """Writes and reads ``order_id_generations`` records."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def record(
        self,
        *,
        order_id: str,
        user_id: str,
        components: dict[str, Any],
        address: Address,
        generated_at: datetime,
    ) -> OrderIdGeneration:
        """Persist one generation record and commit it."""
        entry = OrderIdGeneration(
            order_id=order_id,
            user_id=user_id,
            generated_at=generated_at,
            components=components,
            location=address_location(address),
        )
        self.session.add(entry)
        await self.session.commit()

        logger.debug("Recorded order ID generation", order_id=order_id, user_id=user_id)
        return entry

    async def list_for_order_id(self, order_id: str) -> list[OrderIdGeneration]:
        """All generation records of an order ID, newest first.

        Order IDs do not encode the date, so the same ID recurs on later days.
        """
        statement = (
            select(OrderIdGeneration)
            .where(OrderIdGeneration.order_id == order_id)
            .order_by(
                OrderIdGeneration.generated_at.desc(),  # type: ignore[attr-defined]
                OrderIdGeneration.id.desc(),  # type: ignore[attr-defined]
            )
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get(self, order_id: str) -> OrderIdGeneration:
        """Get the most recent generation record of an order ID."""
        entries = await self.list_for_order_id(order_id)
        if not entries:
            raise OrderIdNotFound()
        return entries[0]

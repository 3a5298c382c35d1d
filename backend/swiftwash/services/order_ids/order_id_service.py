"""Smart order ID generation service.

Ties together address lookup, geo resolution, daily sequence allocation
and the audit log. API routes and the CLI call this service; it does not
know about HTTP.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swiftwash.config import settings
from swiftwash.services.addresses.address_service import AddressService
from swiftwash.services.audit.audit_service import OrderIdAuditService
from swiftwash.services.geo.resolver import Address, resolve_location
from swiftwash.services.order_ids.composer import (
    OrderFlags,
    OrderIdComponents,
    order_type_code,
    postal_prefix,
)
from swiftwash.services.order_ids.exceptions import AddressNotFound, AddressNotResolvable
from swiftwash.services.sequence.allocator import SequenceAllocator
from swiftwash.utils.datetime_utils import order_date_key, utc_now

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GeneratedOrderId:
    """Result of a successful generation."""

    order_id: str
    components: OrderIdComponents
    generated_at: datetime


class OrderIdService:
    """Service for issuing smart order IDs.

    The sequence allocator commits on its own sessions; ``session`` is used
    for the address lookup and the audit record only.
    """

    def __init__(
        self,
        session: AsyncSession,
        allocator: SequenceAllocator,
        *,
        audit_enabled: bool | None = None,
    ):
        self.session = session
        self.allocator = allocator
        self.addresses = AddressService(session)
        self.audit = OrderIdAuditService(session)
        self.audit_enabled = settings.audit_enabled if audit_enabled is None else audit_enabled

    async def generate(
        self,
        user_id: str,
        order_type: str,
        flags: OrderFlags | None = None,
    ) -> GeneratedOrderId:
        """Generate the next order ID for a user's order.

        Raises:
            AddressNotFound: User has no address on file.
            AddressNotResolvable: Address has neither postal code nor coordinates.
            AllocationFailed: Daily counter could not be incremented.
        """
        address = await self.addresses.get_primary_address(user_id)
        if address is None:
            raise AddressNotFound(f"No address found for user {user_id}")

        return await self.generate_for_address(user_id, address, order_type, flags)

    async def generate_for_address(
        self,
        user_id: str,
        address: Address,
        order_type: str,
        flags: OrderFlags | None = None,
    ) -> GeneratedOrderId:
        """Generate an order ID for an already loaded address."""
        if not address.postal_code and not address.has_coordinates:
            raise AddressNotResolvable(f"Address of user {user_id} has no postal code or coordinates")

        location = resolve_location(address)
        generated_at = utc_now()
        sequence = await self.allocator.next_sequence(location.city_code, order_date_key(generated_at))

        components = OrderIdComponents(
            city_code=location.city_code,
            direction=location.direction,
            postal_prefix=postal_prefix(address.postal_code),
            type_code=order_type_code(order_type),
            sequence_number=sequence,
            flags=(flags or OrderFlags()).codes(),
        )
        order_id = components.order_id

        logger.info(
            "Generated order ID",
            order_id=order_id,
            user_id=user_id,
            city_code=components.city_code,
        )

        if self.audit_enabled:
            await self._record_audit(user_id, components, address, generated_at)

        return GeneratedOrderId(order_id=order_id, components=components, generated_at=generated_at)

    async def _record_audit(
        self,
        user_id: str,
        components: OrderIdComponents,
        address: Address,
        generated_at: datetime,
    ) -> None:
        """Write the audit record; a failure here does not revoke the issued ID."""
        try:
            await self.audit.record(
                order_id=components.order_id,
                user_id=user_id,
                components=components.to_dict(),
                address=address,
                generated_at=generated_at,
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(
                "Failed to record order ID generation",
                order_id=components.order_id,
                user_id=user_id,
                error=str(e),
            )

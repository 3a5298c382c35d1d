"""Customer address lookup."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from swiftwash.models.address import UserAddress
from swiftwash.services.geo.resolver import Address


class AddressService:
    """Read access to saved customer addresses."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_primary_address(self, user_id: str) -> Address | None:
        """Return the user's first saved address, or None if there is none."""
        statement = (
            select(UserAddress)
            .where(UserAddress.user_id == user_id)
            .order_by(UserAddress.created_at, UserAddress.id)  # type: ignore[arg-type]
            .limit(1)
        )
        result = await self.session.execute(statement)
        record = result.scalars().first()
        if record is None:
            return None
        return Address(
            postal_code=record.postal_code,
            city_name=record.city_name,
            latitude=record.latitude,
            longitude=record.longitude,
        )

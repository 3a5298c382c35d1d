"""Database models."""

from sqlmodel import SQLModel

from swiftwash.models.address import UserAddress
from swiftwash.models.enums import Direction, OrderFlagCode, OrderTypeCode
from swiftwash.models.order_counter import OrderCounter
from swiftwash.models.order_id_generation import OrderIdGeneration

__all__ = [
    "SQLModel",
    "UserAddress",
    "OrderCounter",
    "OrderIdGeneration",
    "Direction",
    "OrderFlagCode",
    "OrderTypeCode",
]

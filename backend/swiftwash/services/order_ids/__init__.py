"""Order ID composition, parsing and generation."""

from swiftwash.services.order_ids.composer import (
    ORDER_TYPE_CODES,
    OrderFlags,
    OrderIdComponents,
    build_order_id,
    order_type_code,
    parse_order_id,
    postal_prefix,
)
from swiftwash.services.order_ids.exceptions import (
    AddressNotFound,
    AddressNotResolvable,
    InvalidOrderId,
)
from swiftwash.services.order_ids.order_id_service import GeneratedOrderId, OrderIdService

__all__ = [
    "ORDER_TYPE_CODES",
    "AddressNotFound",
    "AddressNotResolvable",
    "GeneratedOrderId",
    "InvalidOrderId",
    "OrderFlags",
    "OrderIdComponents",
    "OrderIdService",
    "build_order_id",
    "order_type_code",
    "parse_order_id",
    "postal_prefix",
]

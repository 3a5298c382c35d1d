"""Order ID format.

    SW-{city}-{direction}-{postal prefix}-{type}-{sequence}[-{flag}...]

e.g. ``SW-NGP-NE-440-WSH-001-URG``. Flags always appear in the order
urgent, referred, student.
"""

import re
from dataclasses import dataclass
from typing import Any

from swiftwash.models.enums import Direction, OrderFlagCode, OrderTypeCode
from swiftwash.services.order_ids.exceptions import InvalidOrderId

ORDER_ID_PREFIX = "SW"
POSTAL_PREFIX_LENGTH = 3
MISSING_POSTAL_PREFIX = "000"

ORDER_TYPE_CODES: dict[str, OrderTypeCode] = {
    "ironing": OrderTypeCode.IRONING,
    "iron": OrderTypeCode.IRONING,
    "wash": OrderTypeCode.WASH,
    "washing": OrderTypeCode.WASH,
    "laundry": OrderTypeCode.WASH,
    "swift": OrderTypeCode.SWIFT,
    "express": OrderTypeCode.SWIFT,
}

_CITY_CODE_RE = re.compile(r"^[A-Z]{3}$")
_SEQUENCE_RE = re.compile(r"^\d{3,}$")


def order_type_code(order_type: str) -> OrderTypeCode:
    """Map a free-text order type to its code (case-insensitive).

    Unknown types map to GEN.
    """
    return ORDER_TYPE_CODES.get(order_type.strip().lower(), OrderTypeCode.GENERAL)


def postal_prefix(postal_code: str | None) -> str:
    """First three characters of the postal code.

    Shorter codes pass through unchanged; a missing code becomes "000".
    """
    if postal_code is None or not postal_code.strip():
        return MISSING_POSTAL_PREFIX
    return postal_code.strip()[:POSTAL_PREFIX_LENGTH]


@dataclass(frozen=True)
class OrderFlags:
    """Optional markers appended to an order ID."""

    is_urgent: bool = False
    is_referred: bool = False
    is_student: bool = False

    def codes(self) -> tuple[OrderFlagCode, ...]:
        """Active flag codes in their fixed order."""
        active = (
            (self.is_urgent, OrderFlagCode.URGENT),
            (self.is_referred, OrderFlagCode.REFERRED),
            (self.is_student, OrderFlagCode.STUDENT),
        )
        return tuple(code for enabled, code in active if enabled)


@dataclass(frozen=True)
class OrderIdComponents:
    """Decomposed order ID."""

    city_code: str
    direction: Direction
    postal_prefix: str
    type_code: OrderTypeCode
    sequence_number: str
    flags: tuple[OrderFlagCode, ...] = ()

    @property
    def order_id(self) -> str:
        return build_order_id(self)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serializable representation (audit log, API)."""
        return {
            "city_code": self.city_code,
            "direction": str(self.direction),
            "postal_prefix": self.postal_prefix,
            "type_code": str(self.type_code),
            "sequence_number": self.sequence_number,
            "flags": [str(flag) for flag in self.flags],
        }


def build_order_id(components: OrderIdComponents) -> str:
    """Format components into the dash-delimited order ID."""
    parts = [
        ORDER_ID_PREFIX,
        components.city_code,
        str(components.direction),
        components.postal_prefix,
        str(components.type_code),
        components.sequence_number,
        *(str(flag) for flag in components.flags),
    ]
    return "-".join(parts)


def parse_order_id(order_id: str) -> OrderIdComponents:
    """Split an order ID back into its components.

    Raises:
        InvalidOrderId: If the string does not follow the order ID format.
    """
    parts = order_id.strip().split("-")
    if len(parts) < 6 or parts[0] != ORDER_ID_PREFIX:
        raise InvalidOrderId(f"Not an order ID: {order_id!r}")

    _, city_code, direction, prefix, type_code, sequence, *flags = parts

    if not _CITY_CODE_RE.match(city_code):
        raise InvalidOrderId(f"Invalid city code {city_code!r} in {order_id!r}")
    if not prefix:
        raise InvalidOrderId(f"Missing postal prefix in {order_id!r}")
    if not _SEQUENCE_RE.match(sequence):
        raise InvalidOrderId(f"Invalid sequence {sequence!r} in {order_id!r}")

    try:
        parsed_direction = Direction(direction)
        parsed_type = OrderTypeCode(type_code)
        parsed_flags = tuple(OrderFlagCode(flag) for flag in flags)
    except ValueError as e:
        raise InvalidOrderId(f"Invalid component in {order_id!r}: {e}") from e

    flag_order = list(OrderFlagCode)
    positions = [flag_order.index(flag) for flag in parsed_flags]
    if positions != sorted(set(positions)):
        raise InvalidOrderId(f"Flags out of order or repeated in {order_id!r}")

    return OrderIdComponents(
        city_code=city_code,
        direction=parsed_direction,
        postal_prefix=prefix,
        type_code=parsed_type,
        sequence_number=sequence,
        flags=parsed_flags,
    )

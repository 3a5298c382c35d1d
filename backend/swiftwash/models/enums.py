"""Enum definitions for order ID components."""

from enum import StrEnum


class Direction(StrEnum):
    """Compass sector of an address relative to its city center.

    Declaration order is clockwise from north; the bearing bucketing
    in the geo resolver indexes into it.
    """

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


class OrderTypeCode(StrEnum):
    """Three-letter service type code embedded in order IDs."""

    IRONING = "IRN"
    WASH = "WSH"
    SWIFT = "SFT"
    GENERAL = "GEN"


class OrderFlagCode(StrEnum):
    """Optional order flags, declared in the order they appear in an ID."""

    URGENT = "URG"
    REFERRED = "RFR"
    STUDENT = "STD"

"""Customer address lookup."""

from swiftwash.services.addresses.address_service import AddressService

__all__ = ["AddressService"]

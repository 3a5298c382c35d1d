"""Order ID domain exceptions."""

from swiftwash.services.exceptions import PreconditionFailed, ValidationError


class AddressNotFound(PreconditionFailed):
    """User has no address on file."""

    pass


class AddressNotResolvable(PreconditionFailed):
    """Address has neither a postal code nor coordinates."""

    pass


class InvalidOrderId(ValidationError):
    """String is not a well-formed order ID."""

    pass

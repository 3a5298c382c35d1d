"""Audit log exceptions."""

from swiftwash.services.exceptions import NotFoundError


class OrderIdNotFound(NotFoundError):
    """No generation record exists for the order ID."""

    pass

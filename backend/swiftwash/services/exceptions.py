"""Base service exceptions.

These exceptions are raised by the service layer and should be caught
by the API layer and converted to appropriate HTTP responses.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass


class NotFoundError(ServiceError):
    """Resource not found."""

    pass


class ValidationError(ServiceError):
    """Validation error."""

    pass


class PreconditionFailed(ServiceError):
    """Request is well-formed but the stored state does not allow it.

    Not retried: the caller has to fix the underlying data first
    (e.g. add an address to the user's profile).
    """

    pass

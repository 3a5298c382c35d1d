"""Sequence allocation exceptions."""

from swiftwash.services.exceptions import ServiceError


class SequenceConflict(Exception):
    """Another allocator updated the counter between our read and write.

    Internal to the allocator: it is retried, never surfaced to callers.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Counter {key} changed concurrently")


class AllocationFailed(ServiceError):
    """Counter could not be incremented (store unreachable or retries exhausted).

    No order ID may be issued when this is raised. Callers may retry the
    whole operation.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Failed to allocate sequence for {key}: {reason}")

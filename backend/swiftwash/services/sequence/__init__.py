"""Daily per-city order sequence allocation."""

from swiftwash.services.sequence.allocator import SequenceAllocator, format_sequence
from swiftwash.services.sequence.exceptions import AllocationFailed, SequenceConflict
from swiftwash.services.sequence.store import (
    CounterKey,
    CounterSnapshot,
    CounterStore,
    InMemoryCounterStore,
    SqlCounterStore,
)

__all__ = [
    "AllocationFailed",
    "CounterKey",
    "CounterSnapshot",
    "CounterStore",
    "InMemoryCounterStore",
    "SequenceAllocator",
    "SequenceConflict",
    "SqlCounterStore",
    "format_sequence",
]

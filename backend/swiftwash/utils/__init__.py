"""Utility functions and helpers."""

from swiftwash.utils.datetime_utils import order_date_key, utc_now
from swiftwash.utils.retry import ConflictRetryConfig, get_conflict_retrying

__all__ = [
    "order_date_key",
    "utc_now",
    "ConflictRetryConfig",
    "get_conflict_retrying",
]

"""Datetime utility functions."""

from datetime import UTC, datetime

# Order IDs are dated in UTC so every node agrees on the counter key
ORDER_DATE_FORMAT = "%y%m%d"


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def order_date_key(moment: datetime | None = None) -> str:
    """Format the calendar day used to scope daily order counters.

    Args:
        moment: Point in time to format (defaults to now). Naive datetimes
            are assumed to already be in UTC.

    Returns:
        Date as ``YYMMDD`` in UTC, e.g. ``"260117"``
    """
    if moment is None:
        moment = utc_now()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).strftime(ORDER_DATE_FORMAT)

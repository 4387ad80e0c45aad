"""Instant parsing and local calendar-day keys.

Every instant that enters the review engine passes through here. Naive
datetimes are treated as UTC (that's how the card store writes them), and
the observer's time zone is always passed in explicitly so "today" is
reproducible regardless of the machine's local zone.
"""

import logging
from datetime import UTC, date, datetime, tzinfo

logger = logging.getLogger(__name__)

# Anything a card store might hand back for a timestamp column.
InstantLike = datetime | str | None


def parse_instant(value: InstantLike) -> datetime | None:
    """Parse a stored timestamp into an aware UTC datetime.

    Returns None for null, empty, or unparseable values. A corrupt timestamp
    on one card must not abort a computation over the whole collection, so
    this never raises for bad input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            instant = datetime.fromisoformat(text)
        except ValueError:
            logger.debug("Skipping malformed timestamp %r", value)
            return None
    else:
        logger.debug("Skipping non-timestamp value %r", value)
        return None

    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def day_key(instant: datetime, tz: tzinfo = UTC) -> date:
    """Return the calendar date of ``instant`` as seen from ``tz``.

    Two instants map to the same key iff they fall on the same local date.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(tz).date()


def to_storage(instant: datetime) -> datetime:
    """Convert an instant to the naive UTC form the card store persists."""
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(UTC).replace(tzinfo=None)

"""Review activity metrics: reviews done today and the current day streak.

Both work on the ``last_reviewed_at`` values of one user's cards. Days are
local calendar days in the observer's time zone.
"""

from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta, tzinfo

from backend.srs.dates import InstantLike, day_key, parse_instant


def _review_days(values: Iterable[InstantLike], tz: tzinfo) -> list[date]:
    """Map each parseable timestamp to its local day, skipping nulls and junk."""
    days = []
    for value in values:
        instant = parse_instant(value)
        if instant is not None:
            days.append(day_key(instant, tz))
    return days


def count_reviewed_today(
    values: Iterable[InstantLike],
    now: datetime,
    tz: tzinfo = UTC,
) -> int:
    """Count reviews that fall on today's local date.

    Each card counts on its own, so five cards reviewed today give 5.
    """
    today = day_key(now, tz)
    return sum(1 for day in _review_days(values, tz) if day == today)


def compute_streak(
    values: Iterable[InstantLike],
    now: datetime,
    tz: tzinfo = UTC,
) -> int:
    """Return the number of consecutive days, ending today, with a review.

    A streak that doesn't include today is 0, even if the user reviewed
    yesterday. Input order doesn't matter.
    """
    days = sorted(set(_review_days(values, tz)), reverse=True)
    if not days or days[0] != day_key(now, tz):
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - timedelta(days=1) != current:
            break
        streak += 1
    return streak

"""Rating-based review scheduler.

A card rated ``easy`` comes back in three days, ``medium`` tomorrow and
``hard`` right away. Offsets are calendar days on the observer's wall clock,
not multiples of 24 hours, so a card reviewed at 09:00 is due at 09:00 even
across a daylight-saving change.
"""

from datetime import UTC, datetime, timedelta, tzinfo
from enum import StrEnum


class Rating(StrEnum):
    """Self-assessed recall difficulty submitted after a card is revealed."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class InvalidRatingError(ValueError):
    """Raised when a rating is outside easy/medium/hard."""

    def __init__(self, rating: object) -> None:
        self.rating = rating
        allowed = ", ".join(r.value for r in Rating)
        super().__init__(f"Invalid rating {rating!r}; expected one of: {allowed}")


INTERVAL_DAYS: dict[Rating, int] = {
    Rating.EASY: 3,
    Rating.MEDIUM: 1,
    Rating.HARD: 0,
}


def coerce_rating(rating: Rating | str) -> Rating:
    """Return ``rating`` as a Rating, raising InvalidRatingError otherwise."""
    if isinstance(rating, Rating):
        return rating
    if isinstance(rating, str):
        try:
            return Rating(rating)
        except ValueError:
            pass
    raise InvalidRatingError(rating)


def next_due_at(rating: Rating | str, now: datetime, tz: tzinfo = UTC) -> datetime:
    """Compute when a card rated at ``now`` is due again.

    Args:
        rating: easy, medium or hard.
        now: The instant the rating was submitted. Naive values are UTC.
        tz: Observer time zone whose wall clock the days are added on.

    Returns:
        The due instant, naive UTC for naive input, otherwise in the
        tzinfo of ``now``.

    Raises:
        InvalidRatingError: ``rating`` is not one of the three ratings.
    """
    days = INTERVAL_DAYS[coerce_rating(rating)]
    if days == 0:
        return now

    aware = now if now.tzinfo is not None else now.replace(tzinfo=UTC)
    # Adding a timedelta to an aware datetime is wall-clock arithmetic;
    # zoneinfo resolves the offset of the resulting local time.
    local_due = aware.astimezone(tz) + timedelta(days=days)

    if now.tzinfo is None:
        return local_due.astimezone(UTC).replace(tzinfo=None)
    return local_due.astimezone(now.tzinfo)


"""Due-card selection.

A card is due when it has never been scheduled or its scheduled time has
passed. Due-ness is a function of the clock alone, so it is recomputed on
every call rather than cached on the card.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Protocol, TypeVar

from backend.srs.dates import InstantLike, parse_instant


class Schedulable(Protocol):
    next_review_at: InstantLike


CardT = TypeVar("CardT", bound=Schedulable)

# Sort key for cards that were never scheduled; they come before everything.
_UNSCHEDULED = (0, datetime.min.replace(tzinfo=UTC))


def is_due(card: Schedulable, now: datetime) -> bool:
    """Return True if ``card`` is due at ``now`` (the boundary is inclusive)."""
    scheduled = parse_instant(card.next_review_at)
    if scheduled is None:
        return True
    return scheduled <= parse_instant(now)


def _due_order(card: Schedulable) -> tuple[int, datetime]:
    scheduled = parse_instant(card.next_review_at)
    return _UNSCHEDULED if scheduled is None else (1, scheduled)


def select_due(cards: Iterable[CardT], now: datetime) -> list[CardT]:
    """Return the due cards, never-scheduled first, then oldest due first.

    Cards with equal due times keep their input order.
    """
    return sorted((card for card in cards if is_due(card, now)), key=_due_order)

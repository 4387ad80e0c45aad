"""Dashboard summary built from a user's decks and cards."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import Protocol

from backend.srs.dates import InstantLike
from backend.srs.due import select_due
from backend.srs.streak import compute_streak, count_reviewed_today

UNCATEGORIZED = "Uncategorized"


class DeckLike(Protocol):
    id: int
    name: str


class CardLike(Protocol):
    deck_id: int | None
    last_reviewed_at: InstantLike
    next_review_at: InstantLike


@dataclass(frozen=True)
class DeckRow:
    name: str
    deck_id: int | None
    total: int
    due: int


@dataclass(frozen=True)
class DashboardSummary:
    total_cards: int
    due_count: int
    streak_days: int
    reviewed_today: int
    deck_rows: list[DeckRow] = field(default_factory=list)


def build_dashboard(
    decks: Sequence[DeckLike],
    cards: Sequence[CardLike],
    now: datetime,
    tz: tzinfo = UTC,
) -> DashboardSummary:
    """Summarize a user's collection for the dashboard.

    Deck rows follow the order of ``decks``. Cards without a deck are
    reported in a trailing "Uncategorized" row, which is left out when
    there are none.
    """
    due_cards = select_due(cards, now)
    reviewed = [card.last_reviewed_at for card in cards]

    total_by_deck = Counter(card.deck_id for card in cards)
    due_by_deck = Counter(card.deck_id for card in due_cards)

    rows = [
        DeckRow(
            name=deck.name,
            deck_id=deck.id,
            total=total_by_deck.get(deck.id, 0),
            due=due_by_deck.get(deck.id, 0),
        )
        for deck in decks
    ]
    if total_by_deck.get(None, 0) > 0 or due_by_deck.get(None, 0) > 0:
        rows.append(
            DeckRow(
                name=UNCATEGORIZED,
                deck_id=None,
                total=total_by_deck.get(None, 0),
                due=due_by_deck.get(None, 0),
            )
        )

    return DashboardSummary(
        total_cards=len(cards),
        due_count=len(due_cards),
        streak_days=compute_streak(reviewed, now, tz),
        reviewed_today=count_reviewed_today(reviewed, now, tz),
        deck_rows=rows,
    )

"""Card store: deck and flashcard persistence scoped to one owner.

Every query filters on ``owner_id``; callers never see another user's rows.
Lookups that miss return None (or False for deletes) and the caller decides
whether that's an error.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo

from sqlalchemy import Select, and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.config import utcnow
from backend.models.deck import Deck
from backend.models.flashcard import Flashcard
from backend.srs.dates import to_storage
from backend.srs.scheduler import Rating, coerce_rating, next_due_at

logger = logging.getLogger(__name__)

DEFAULT_DECK_NAME = "Default"
SEED_LIMIT = 100


@dataclass(frozen=True)
class NewCard:
    word: str
    meaning: str


def _scoped(stmt: Select, owner_id: str, deck_id: int | None, uncategorized: bool) -> Select:
    stmt = stmt.where(Flashcard.owner_id == owner_id)
    if uncategorized:
        return stmt.where(Flashcard.deck_id.is_(None))
    if deck_id is not None:
        return stmt.where(Flashcard.deck_id == deck_id)
    return stmt


class CardStore:
    """Async CRUD over decks and flashcards for the quiz and dashboard."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # --- Decks ---

    async def list_decks(self, owner_id: str) -> list[Deck]:
        stmt = (
            select(Deck)
            .where(Deck.owner_id == owner_id)
            .order_by(Deck.created_at.asc(), Deck.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_deck(self, owner_id: str, deck_id: int) -> Deck | None:
        stmt = select(Deck).where(and_(Deck.owner_id == owner_id, Deck.id == deck_id))
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def create_deck(self, owner_id: str, name: str) -> Deck:
        deck = Deck(owner_id=owner_id, name=name)
        self.session.add(deck)
        await self.session.commit()
        await self.session.refresh(deck)
        logger.info("Created deck %d for owner %s", deck.id, owner_id)
        return deck

    async def rename_deck(self, owner_id: str, deck_id: int, name: str) -> Deck | None:
        deck = await self.get_deck(owner_id, deck_id)
        if deck is None:
            return None
        deck.name = name
        await self.session.commit()
        await self.session.refresh(deck)
        return deck

    async def delete_deck(self, owner_id: str, deck_id: int) -> bool:
        """Delete a deck, moving its cards to uncategorized in the same transaction."""
        deck = await self.get_deck(owner_id, deck_id)
        if deck is None:
            return False

        detached = await self.session.execute(
            update(Flashcard)
            .where(and_(Flashcard.owner_id == owner_id, Flashcard.deck_id == deck_id))
            .values(deck_id=None)
        )
        await self.session.delete(deck)
        await self.session.commit()
        logger.info(
            "Deleted deck %d for owner %s (%d cards uncategorized)",
            deck_id,
            owner_id,
            detached.rowcount,
        )
        return True

    # --- Cards ---

    async def count_cards(self, owner_id: str) -> int:
        stmt = select(func.count(Flashcard.id)).where(Flashcard.owner_id == owner_id)
        return (await self.session.execute(stmt)).scalar() or 0

    async def list_cards(
        self,
        owner_id: str,
        deck_id: int | None = None,
        uncategorized: bool = False,
        q: str | None = None,
    ) -> list[Flashcard]:
        """Return the owner's cards, newest first.

        Pass ``deck_id`` to limit to one deck, or ``uncategorized=True`` for
        cards that aren't in any deck. ``q`` keeps cards whose word or meaning
        contains it, ignoring case; a blank ``q`` matches everything.
        """
        stmt = _scoped(select(Flashcard), owner_id, deck_id, uncategorized)
        needle = (q or "").strip().lower()
        if needle:
            stmt = stmt.where(
                or_(
                    func.lower(Flashcard.word).contains(needle, autoescape=True),
                    func.lower(Flashcard.meaning).contains(needle, autoescape=True),
                )
            )
        stmt = stmt.order_by(Flashcard.created_at.desc(), Flashcard.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_card(self, owner_id: str, card_id: int) -> Flashcard | None:
        stmt = select(Flashcard).where(
            and_(Flashcard.owner_id == owner_id, Flashcard.id == card_id)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def create_card(
        self,
        owner_id: str,
        word: str,
        meaning: str,
        deck_id: int | None = None,
        now: datetime | None = None,
    ) -> Flashcard:
        """Add a card that is due immediately."""
        created = to_storage(now) if now is not None else utcnow()
        card = Flashcard(
            owner_id=owner_id,
            deck_id=deck_id,
            word=word,
            meaning=meaning,
            review_count=0,
            next_review_at=created,
            created_at=created,
        )
        self.session.add(card)
        await self.session.commit()
        await self.session.refresh(card)
        logger.info("Created card %d (%r) for owner %s", card.id, word, owner_id)
        return card

    async def create_cards(
        self,
        owner_id: str,
        items: Iterable[NewCard],
        deck_id: int | None = None,
        now: datetime | None = None,
    ) -> int:
        """Add many cards in one commit and return how many were inserted."""
        created = to_storage(now) if now is not None else utcnow()
        cards = [
            Flashcard(
                owner_id=owner_id,
                deck_id=deck_id,
                word=item.word,
                meaning=item.meaning,
                review_count=0,
                next_review_at=created,
                created_at=created,
            )
            for item in items
        ]
        if not cards:
            return 0
        self.session.add_all(cards)
        await self.session.commit()
        logger.info("Created %d cards for owner %s", len(cards), owner_id)
        return len(cards)

    async def seed_if_empty(
        self,
        owner_id: str,
        items: Sequence[NewCard],
        limit: int = SEED_LIMIT,
        now: datetime | None = None,
    ) -> int:
        """Give a brand-new account its starter cards.

        Only runs when the owner has no cards at all. The cards go into the
        owner's first deck, or a new "Default" deck when there is none.
        Returns how many cards were inserted.
        """
        if await self.count_cards(owner_id) > 0:
            return 0
        decks = await self.list_decks(owner_id)
        deck = decks[0] if decks else await self.create_deck(owner_id, DEFAULT_DECK_NAME)
        inserted = await self.create_cards(owner_id, items[:limit], deck.id, now=now)
        logger.info(
            "Seeded %d starter cards into deck %d for owner %s", inserted, deck.id, owner_id
        )
        return inserted

    async def update_card(
        self,
        owner_id: str,
        card_id: int,
        word: str | None = None,
        meaning: str | None = None,
        deck_id: int | None = None,
        clear_deck: bool = False,
    ) -> Flashcard | None:
        """Edit card content. Scheduling fields are left untouched."""
        card = await self.get_card(owner_id, card_id)
        if card is None:
            return None
        if word is not None:
            card.word = word
        if meaning is not None:
            card.meaning = meaning
        if clear_deck:
            card.deck_id = None
        elif deck_id is not None:
            card.deck_id = deck_id
        await self.session.commit()
        await self.session.refresh(card)
        return card

    async def delete_card(self, owner_id: str, card_id: int) -> bool:
        card = await self.get_card(owner_id, card_id)
        if card is None:
            return False
        await self.session.delete(card)
        await self.session.commit()
        logger.info("Deleted card %d for owner %s", card_id, owner_id)
        return True

    # --- Quiz ---

    async def fetch_due_cards(
        self,
        owner_id: str,
        deck_id: int | None = None,
        uncategorized: bool = False,
        now: datetime | None = None,
    ) -> list[Flashcard]:
        """Return due cards: never scheduled first, then by due time ascending."""
        cutoff = to_storage(now) if now is not None else utcnow()
        stmt = _scoped(select(Flashcard), owner_id, deck_id, uncategorized).where(
            or_(Flashcard.next_review_at.is_(None), Flashcard.next_review_at <= cutoff)
        )
        stmt = stmt.order_by(Flashcard.next_review_at.asc().nulls_first(), Flashcard.id.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def rate_card(
        self,
        owner_id: str,
        card_id: int,
        rating: Rating | str,
        now: datetime | None = None,
        tz: tzinfo = UTC,
    ) -> Flashcard | None:
        """Record a rating and reschedule the card.

        All four review fields are written by one UPDATE, and the count is
        incremented in the database so concurrent ratings can't lose one.

        Raises:
            InvalidRatingError: before anything is read or written.
        """
        reviewed_at = to_storage(now) if now is not None else utcnow()
        rating = coerce_rating(rating)
        next_review_at = next_due_at(rating, reviewed_at, tz)

        result = await self.session.execute(
            update(Flashcard)
            .where(and_(Flashcard.owner_id == owner_id, Flashcard.id == card_id))
            .values(
                last_reviewed_at=reviewed_at,
                next_review_at=next_review_at,
                difficulty_level=rating.value,
                review_count=Flashcard.review_count + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        await self.session.commit()

        card = await self.get_card(owner_id, card_id)
        if card is not None:
            await self.session.refresh(card)
            logger.info(
                "Card %d rated %s: review #%d, next review at %s",
                card_id,
                rating.value,
                card.review_count,
                card.next_review_at,
            )
        return card

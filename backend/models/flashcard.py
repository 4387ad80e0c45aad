"""Flashcard model carrying the review schedule of one word/meaning pair."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.config import utcnow
from backend.models.base import Base, TimestampMixin


class Flashcard(Base, TimestampMixin):
    """A vocabulary card owned by one user, optionally filed under a deck."""

    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    deck_id: Mapped[int | None] = mapped_column(
        ForeignKey("decks.id", ondelete="SET NULL"), nullable=True, index=True
    )  # None = uncategorized
    word: Mapped[str] = mapped_column(String(500), nullable=False)
    meaning: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty_level: Mapped[str | None] = mapped_column(
        String(10), nullable=True
    )  # easy, medium, hard
    last_reviewed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_review_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, default=utcnow
    )

    deck: Mapped[Optional["Deck"]] = relationship(back_populates="cards")  # type: ignore[name-defined] # noqa: F821

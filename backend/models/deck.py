from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.models.base import Base, TimestampMixin


class Deck(Base, TimestampMixin):
    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Deleting a deck detaches its cards; the store nulls deck_id before the delete.
    cards: Mapped[list["Flashcard"]] = relationship(back_populates="deck", passive_deletes=True)  # type: ignore[name-defined] # noqa: F821

"""SQLAlchemy ORM models for the vocabulary card store."""

from backend.models.base import Base
from backend.models.deck import Deck
from backend.models.flashcard import Flashcard

__all__ = ["Base", "Deck", "Flashcard"]

"""Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from backend.srs.scheduler import Rating

DeckName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Word = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
Meaning = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# --- Decks ---


class DeckCreateRequest(BaseModel):
    name: DeckName


class DeckResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime


# --- Cards ---


class CardCreateRequest(BaseModel):
    word: Word
    meaning: Meaning
    deck_id: int | None = None


class CardUpdateRequest(BaseModel):
    """Content edit; fields left out are unchanged. ``deck_id: null`` uncategorizes."""

    word: Word | None = None
    meaning: Meaning | None = None
    deck_id: int | None = None


class CardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int | None
    word: str
    meaning: str
    difficulty_level: Rating | None
    last_reviewed_at: datetime | None
    review_count: int
    next_review_at: datetime | None
    created_at: datetime


class SeedResponse(BaseModel):
    inserted: int


# --- Quiz ---


class RateRequest(BaseModel):
    rating: str  # easy, medium, hard; checked by the scheduler


# --- Dashboard ---


class DeckRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    deck_id: int | None
    total: int
    due: int


class DashboardResponse(BaseModel):
    """Collection-wide review metrics for one user."""

    model_config = ConfigDict(from_attributes=True)

    total_cards: int
    due_count: int
    streak_days: int
    reviewed_today: int
    deck_rows: list[DeckRowResponse]

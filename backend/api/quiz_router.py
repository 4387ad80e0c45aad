"""API routes for the review quiz loop."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.schemas import CardResponse, RateRequest
from backend.config import settings, utcnow
from backend.database import get_session
from backend.store import CardStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{owner_id}/quiz", tags=["quiz"])


@router.get("/due", response_model=list[CardResponse])
async def due_cards(
    owner_id: str,
    deck_id: int | None = None,
    uncategorized: bool = False,
    db: AsyncSession = Depends(get_session),
) -> list[CardResponse]:
    """Return the cards due now, never-reviewed cards first."""
    cards = await CardStore(db).fetch_due_cards(
        owner_id, deck_id, uncategorized=uncategorized, now=utcnow()
    )
    return [CardResponse.model_validate(card) for card in cards]


@router.post("/{card_id}/rate", response_model=CardResponse)
async def rate_card(
    owner_id: str,
    card_id: int,
    request: RateRequest,
    db: AsyncSession = Depends(get_session),
) -> CardResponse:
    """Submit a rating and return the rescheduled card."""
    card = await CardStore(db).rate_card(
        owner_id, card_id, request.rating, now=utcnow(), tz=settings.tz
    )
    if card is None:
        raise HTTPException(status_code=404, detail="Card not found")
    return CardResponse.model_validate(card)

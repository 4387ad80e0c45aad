"""API route for the per-user review dashboard."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.schemas import DashboardResponse
from backend.config import settings, utcnow
from backend.database import get_session
from backend.srs.dashboard import build_dashboard
from backend.store import CardStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{owner_id}/dashboard", tags=["stats"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    owner_id: str,
    db: AsyncSession = Depends(get_session),
) -> DashboardResponse:
    """Get totals, due count, streak and per-deck breakdown for a user."""
    store = CardStore(db)
    decks = await store.list_decks(owner_id)
    cards = await store.list_cards(owner_id)

    summary = build_dashboard(decks, cards, now=utcnow(), tz=settings.tz)
    logger.debug(
        "Dashboard for %s: %d cards, %d due, streak %d",
        owner_id,
        summary.total_cards,
        summary.due_count,
        summary.streak_days,
    )
    return DashboardResponse.model_validate(summary)

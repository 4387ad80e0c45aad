"""API routes for managing a user's decks."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.schemas import DeckCreateRequest, DeckResponse
from backend.database import get_session
from backend.store import CardStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{owner_id}/decks", tags=["decks"])


@router.get("", response_model=list[DeckResponse])
async def list_decks(
    owner_id: str,
    db: AsyncSession = Depends(get_session),
) -> list[DeckResponse]:
    """List the user's decks, oldest first."""
    decks = await CardStore(db).list_decks(owner_id)
    return [DeckResponse.model_validate(deck) for deck in decks]


@router.post("", response_model=DeckResponse, status_code=201)
async def create_deck(
    owner_id: str,
    request: DeckCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> DeckResponse:
    deck = await CardStore(db).create_deck(owner_id, request.name)
    return DeckResponse.model_validate(deck)


@router.patch("/{deck_id}", response_model=DeckResponse)
async def rename_deck(
    owner_id: str,
    deck_id: int,
    request: DeckCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> DeckResponse:
    deck = await CardStore(db).rename_deck(owner_id, deck_id, request.name)
    if deck is None:
        raise HTTPException(status_code=404, detail="Deck not found")
    return DeckResponse.model_validate(deck)


@router.delete("/{deck_id}", status_code=204)
async def delete_deck(
    owner_id: str,
    deck_id: int,
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Delete a deck. Its cards are kept and become uncategorized."""
    if not await CardStore(db).delete_deck(owner_id, deck_id):
        raise HTTPException(status_code=404, detail="Deck not found")
    return Response(status_code=204)

"""API routes for browsing and editing flashcards."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.schemas import (
    CardCreateRequest,
    CardResponse,
    CardUpdateRequest,
    SeedResponse,
)
from backend.database import get_session
from backend.export import UTF8_BOM, cards_to_csv, export_filename
from backend.seed_words import SEED_WORDS
from backend.store import CardStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{owner_id}/cards", tags=["cards"])


async def _require_deck(store: CardStore, owner_id: str, deck_id: int | None) -> None:
    if deck_id is not None and await store.get_deck(owner_id, deck_id) is None:
        raise HTTPException(status_code=404, detail="Deck not found")


@router.get("", response_model=list[CardResponse])
async def list_cards(
    owner_id: str,
    deck_id: int | None = None,
    uncategorized: bool = False,
    q: str | None = None,
    db: AsyncSession = Depends(get_session),
) -> list[CardResponse]:
    """List the user's cards, newest first, optionally matching a search term."""
    cards = await CardStore(db).list_cards(owner_id, deck_id, uncategorized=uncategorized, q=q)
    return [CardResponse.model_validate(card) for card in cards]


@router.get("/export")
async def export_cards(
    owner_id: str,
    deck_id: int | None = None,
    db: AsyncSession = Depends(get_session),
) -> Response:
    """Download the user's cards (or one deck's) as CSV."""
    store = CardStore(db)
    decks = {deck.id: deck.name for deck in await store.list_decks(owner_id)}
    if deck_id is not None and deck_id not in decks:
        raise HTTPException(status_code=404, detail="Deck not found")
    cards = await store.list_cards(owner_id, deck_id)
    filename = export_filename(decks[deck_id] if deck_id is not None else None)
    return Response(
        content=UTF8_BOM + cards_to_csv(cards, decks),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@router.post("/seed", response_model=SeedResponse)
async def seed_cards(owner_id: str, db: AsyncSession = Depends(get_session)) -> SeedResponse:
    """Fill an empty account with starter vocabulary. No-op once it has cards."""
    inserted = await CardStore(db).seed_if_empty(owner_id, SEED_WORDS)
    return SeedResponse(inserted=inserted)


@router.post("", response_model=CardResponse, status_code=201)
async def create_card(
    owner_id: str,
    request: CardCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> CardResponse:
    """Add a card. New cards are due for review straight away."""
    store = CardStore(db)
    await _require_deck(store, owner_id, request.deck_id)
    card = await store.create_card(owner_id, request.word, request.meaning, request.deck_id)
    return CardResponse.model_validate(card)


@router.patch("/{card_id}", response_model=CardResponse)
async def update_card(
    owner_id: str,
    card_id: int,
    request: CardUpdateRequest,
    db: AsyncSession = Depends(get_session),
) -> CardResponse:
    store = CardStore(db)
    await _require_deck(store, owner_id, request.deck_id)
    # An explicit "deck_id": null moves the card out of its deck.
    clear_deck = "deck_id" in request.model_fields_set and request.deck_id is None
    card = await store.update_card(
        owner_id,
        card_id,
        word=request.word,
        meaning=request.meaning,
        deck_id=request.deck_id,
        clear_deck=clear_deck,
    )
    if card is None:
        raise HTTPException(status_code=404, detail="Card not found")
    return CardResponse.model_validate(card)


@router.delete("/{card_id}", status_code=204)
async def delete_card(
    owner_id: str,
    card_id: int,
    db: AsyncSession = Depends(get_session),
) -> Response:
    if not await CardStore(db).delete_card(owner_id, card_id):
        raise HTTPException(status_code=404, detail="Card not found")
    return Response(status_code=204)

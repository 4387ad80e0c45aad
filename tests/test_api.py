"""Tests for the HTTP API: decks, cards, quiz loop and dashboard."""

from datetime import datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from backend.config import utcnow
from backend.database import engine
from backend.main import app

BASE = "/api/users/alice"


@pytest.mark.asyncio
async def test_health_check() -> None:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
    await engine.dispose()
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_deck_lifecycle(client: AsyncClient) -> None:
    created = await client.post(f"{BASE}/decks", json={"name": "  Spanish  "})
    assert created.status_code == 201
    deck = created.json()
    assert deck["name"] == "Spanish"

    renamed = await client.patch(f"{BASE}/decks/{deck['id']}", json={"name": "Español"})
    assert renamed.json()["name"] == "Español"

    card = (
        await client.post(
            f"{BASE}/cards", json={"word": "hola", "meaning": "hello", "deck_id": deck["id"]}
        )
    ).json()

    assert (await client.delete(f"{BASE}/decks/{deck['id']}")).status_code == 204
    assert (await client.get(f"{BASE}/decks")).json() == []

    cards = (await client.get(f"{BASE}/cards")).json()
    assert [(c["id"], c["deck_id"]) for c in cards] == [(card["id"], None)]


@pytest.mark.asyncio
async def test_missing_rows_are_404(client: AsyncClient) -> None:
    assert (await client.patch(f"{BASE}/decks/42", json={"name": "x"})).status_code == 404
    assert (await client.delete(f"{BASE}/decks/42")).status_code == 404
    assert (await client.patch(f"{BASE}/cards/42", json={"word": "x"})).status_code == 404
    assert (await client.delete(f"{BASE}/cards/42")).status_code == 404
    assert (await client.post(f"{BASE}/quiz/42/rate", json={"rating": "easy"})).status_code == 404

    response = await client.post(f"{BASE}/cards", json={"word": "a", "meaning": "b", "deck_id": 42})
    assert response.status_code == 404
    assert response.json() == {"detail": "Deck not found"}


@pytest.mark.asyncio
async def test_blank_text_rejected(client: AsyncClient) -> None:
    assert (await client.post(f"{BASE}/decks", json={"name": "   "})).status_code == 422
    response = await client.post(f"{BASE}/cards", json={"word": "", "meaning": "x"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_cards_are_private_to_owner(client: AsyncClient) -> None:
    card = (await client.post(f"{BASE}/cards", json={"word": "uno", "meaning": "one"})).json()

    assert (await client.get("/api/users/bob/cards")).json() == []
    assert (await client.delete(f"/api/users/bob/cards/{card['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_quiz_loop(client: AsyncClient) -> None:
    card = (await client.post(f"{BASE}/cards", json={"word": "gato", "meaning": "cat"})).json()
    assert card["review_count"] == 0

    due = (await client.get(f"{BASE}/quiz/due")).json()
    assert [c["id"] for c in due] == [card["id"]]

    before = utcnow()
    rated = await client.post(f"{BASE}/quiz/{card['id']}/rate", json={"rating": "medium"})
    assert rated.status_code == 200
    body = rated.json()
    assert body["review_count"] == 1
    assert body["difficulty_level"] == "medium"
    next_review = datetime.fromisoformat(body["next_review_at"])
    assert next_review - before >= timedelta(days=1) - timedelta(seconds=1)

    assert (await client.get(f"{BASE}/quiz/due")).json() == []


@pytest.mark.asyncio
async def test_hard_rating_stays_due(client: AsyncClient) -> None:
    card = (await client.post(f"{BASE}/cards", json={"word": "rojo", "meaning": "red"})).json()
    await client.post(f"{BASE}/quiz/{card['id']}/rate", json={"rating": "hard"})

    due = (await client.get(f"{BASE}/quiz/due")).json()
    assert [c["id"] for c in due] == [card["id"]]
    assert due[0]["review_count"] == 1


@pytest.mark.asyncio
async def test_invalid_rating_is_400(client: AsyncClient) -> None:
    card = (await client.post(f"{BASE}/cards", json={"word": "azul", "meaning": "blue"})).json()

    response = await client.post(f"{BASE}/quiz/{card['id']}/rate", json={"rating": "great"})
    assert response.status_code == 400
    assert "great" in response.json()["detail"]

    cards = (await client.get(f"{BASE}/cards")).json()
    assert cards[0]["review_count"] == 0


@pytest.mark.asyncio
async def test_dashboard(client: AsyncClient) -> None:
    deck = (await client.post(f"{BASE}/decks", json={"name": "Colors"})).json()
    colors = {"deck_id": deck["id"]}
    first = (
        await client.post(f"{BASE}/cards", json={"word": "verde", "meaning": "green", **colors})
    ).json()
    await client.post(f"{BASE}/cards", json={"word": "negro", "meaning": "black", **colors})
    await client.post(f"{BASE}/cards", json={"word": "sí", "meaning": "yes"})
    await client.post(f"{BASE}/quiz/{first['id']}/rate", json={"rating": "easy"})

    dashboard = (await client.get(f"{BASE}/dashboard")).json()
    assert dashboard["total_cards"] == 3
    assert dashboard["due_count"] == 2
    assert dashboard["reviewed_today"] == 1
    assert dashboard["streak_days"] == 1
    assert dashboard["deck_rows"] == [
        {"name": "Colors", "deck_id": deck["id"], "total": 2, "due": 1},
        {"name": "Uncategorized", "deck_id": None, "total": 1, "due": 1},
    ]


@pytest.mark.asyncio
async def test_dashboard_empty(client: AsyncClient) -> None:
    dashboard = (await client.get(f"{BASE}/dashboard")).json()
    assert dashboard == {
        "total_cards": 0,
        "due_count": 0,
        "streak_days": 0,
        "reviewed_today": 0,
        "deck_rows": [],
    }


@pytest.mark.asyncio
async def test_search_cards(client: AsyncClient) -> None:
    await client.post(f"{BASE}/cards", json={"word": "Gato", "meaning": "cat"})
    await client.post(f"{BASE}/cards", json={"word": "perro", "meaning": "dog"})

    found = (await client.get(f"{BASE}/cards", params={"q": " gAt "})).json()
    assert [c["word"] for c in found] == ["Gato"]
    assert len((await client.get(f"{BASE}/cards", params={"q": ""})).json()) == 2


@pytest.mark.asyncio
async def test_export_csv(client: AsyncClient) -> None:
    deck = (await client.post(f"{BASE}/decks", json={"name": "Spanish"})).json()
    await client.post(
        f"{BASE}/cards", json={"word": "hola", "meaning": "hello, hi", "deck_id": deck["id"]}
    )
    await client.post(f"{BASE}/cards", json={"word": "ok", "meaning": "fine"})

    everything = await client.get(f"{BASE}/cards/export")
    assert everything.status_code == 200
    assert everything.headers["content-type"].startswith("text/csv")
    assert "flashcards.csv" in everything.headers["content-disposition"]
    assert everything.content.decode("utf-8").startswith("\ufeffword,meaning,deck\n")

    one_deck = await client.get(f"{BASE}/cards/export", params={"deck_id": deck["id"]})
    assert "flashcards-Spanish.csv" in one_deck.headers["content-disposition"]
    body = one_deck.content.decode("utf-8")
    assert body == '\ufeffword,meaning,deck\nhola,"hello, hi",Spanish\n'

    missing = await client.get(f"{BASE}/cards/export", params={"deck_id": 999})
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_seed_empty_account(client: AsyncClient) -> None:
    first = await client.post(f"{BASE}/cards/seed")
    assert first.json() == {"inserted": 100}
    assert (await client.post(f"{BASE}/cards/seed")).json() == {"inserted": 0}

    decks = (await client.get(f"{BASE}/decks")).json()
    assert [d["name"] for d in decks] == ["Default"]
    assert len((await client.get(f"{BASE}/cards")).json()) == 100

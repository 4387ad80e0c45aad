"""Tests for CLI commands (non-interactive paths)."""

import argparse

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.database import engine
from backend.store import CardStore
from vocab_deck.__main__ import RATING_KEYS, ensure_db, ensure_deck, resolve_deck_id


@pytest.mark.asyncio
async def test_ensure_db() -> None:
    """Database tables can be created."""
    await ensure_db()
    await engine.dispose()


@pytest.mark.asyncio
async def test_ensure_deck_is_idempotent(session: AsyncSession) -> None:
    store = CardStore(session)
    deck = await ensure_deck(store, "local", "Travel")
    again = await ensure_deck(store, "local", "Travel")

    assert again.id == deck.id
    assert [d.name for d in await store.list_decks("local")] == ["Travel"]


@pytest.mark.asyncio
async def test_resolve_deck_id(session: AsyncSession) -> None:
    store = CardStore(session)
    deck = await store.create_deck("local", "Verbs")

    assert await resolve_deck_id(store, "local", None) is None
    assert await resolve_deck_id(store, "local", "Verbs") == deck.id
    with pytest.raises(SystemExit):
        await resolve_deck_id(store, "local", "Missing")


def test_rating_shortcuts_cover_every_rating() -> None:
    assert {r.value for r in RATING_KEYS.values()} == {"easy", "medium", "hard"}


@pytest.mark.asyncio
async def test_add_then_stats(
    session_factory, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import vocab_deck.__main__ as cli

    async def no_init() -> None:
        return None

    monkeypatch.setattr(cli, "async_session", session_factory)
    monkeypatch.setattr(cli, "init_db", no_init)

    await cli.cmd_add(argparse.Namespace(owner="local", word="hola", meaning="hello", deck="Basics"))
    await cli.cmd_stats(argparse.Namespace(owner="local"))

    out = capsys.readouterr().out
    assert "Added 'hola'" in out
    assert "Cards learned:" in out
    assert "Review streak:       0 days" in out

    async with session_factory() as db:
        decks = await CardStore(db).list_decks("local")
    assert [d.name for d in decks] == ["Basics"]


@pytest.mark.asyncio
async def test_seed_then_export(
    session_factory,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    import vocab_deck.__main__ as cli

    async def no_init() -> None:
        return None

    monkeypatch.setattr(cli, "async_session", session_factory)
    monkeypatch.setattr(cli, "init_db", no_init)

    await cli.cmd_seed(argparse.Namespace(owner="local"))
    await cli.cmd_seed(argparse.Namespace(owner="local"))
    out = capsys.readouterr().out
    assert "Added 100 starter cards." in out
    assert "nothing added" in out

    target = tmp_path / "cards.csv"
    await cli.cmd_export(argparse.Namespace(owner="local", deck="Default", output=str(target)))
    text = target.read_text(encoding="utf-8")
    assert text.startswith("\ufeffword,meaning,deck\n")
    assert len(text.splitlines()) == 101
    assert "Exported 100 cards" in capsys.readouterr().out

    await cli.cmd_export(argparse.Namespace(owner="local", deck=None, output="-"))
    assert capsys.readouterr().out.startswith("word,meaning,deck\n")

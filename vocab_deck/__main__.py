"""CLI interface for Vocab Deck.

Usage:
    python -m vocab_deck add "word" "meaning"   Add a card (optionally --deck NAME)
    python -m vocab_deck decks                  List decks with card counts
    python -m vocab_deck due                    Show cards due for review
    python -m vocab_deck quiz                   Review due cards
    python -m vocab_deck stats                  Show your statistics
    python -m vocab_deck seed                   Add starter words to an empty account
    python -m vocab_deck export -o cards.csv    Export cards as CSV (optionally --deck NAME)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from backend.config import settings, utcnow
from backend.database import async_session, init_db
from backend.export import UTF8_BOM, cards_to_csv, export_filename
from backend.models.deck import Deck
from backend.srs.dashboard import build_dashboard
from backend.srs.scheduler import InvalidRatingError, Rating
from backend.seed_words import SEED_WORDS
from backend.store import CardStore

# Single-key shortcuts accepted at the rating prompt.
RATING_KEYS = {"e": Rating.EASY, "m": Rating.MEDIUM, "h": Rating.HARD}


async def ensure_db() -> None:
    """Create tables if they don't exist."""
    await init_db()


async def ensure_deck(store: CardStore, owner_id: str, name: str) -> Deck:
    """Return the owner's deck called ``name``, creating it on first use."""
    for deck in await store.list_decks(owner_id):
        if deck.name == name:
            return deck
    return await store.create_deck(owner_id, name)


async def resolve_deck_id(store: CardStore, owner_id: str, name: str | None) -> int | None:
    if not name:
        return None
    for deck in await store.list_decks(owner_id):
        if deck.name == name:
            return deck.id
    raise SystemExit(f"  No deck named '{name}'.")


async def cmd_add(args: argparse.Namespace) -> None:
    """Add a new card, due immediately."""
    await ensure_db()
    async with async_session() as db:
        store = CardStore(db)
        deck_id = None
        if args.deck:
            deck_id = (await ensure_deck(store, args.owner, args.deck)).id
        card = await store.create_card(args.owner, args.word, args.meaning, deck_id)
    print(f"  Added '{card.word}' (card ready for review).")


async def cmd_decks(args: argparse.Namespace) -> None:
    """List decks with total and due counts."""
    await ensure_db()
    async with async_session() as db:
        store = CardStore(db)
        decks = await store.list_decks(args.owner)
        cards = await store.list_cards(args.owner)
    summary = build_dashboard(decks, cards, now=utcnow(), tz=settings.tz)

    if not summary.deck_rows:
        print("  No decks yet. Add one with: add WORD MEANING --deck NAME")
        return
    for row in summary.deck_rows:
        print(f"  {row.name:<24} {row.total:>4} cards  {row.due:>4} due")


async def cmd_due(args: argparse.Namespace) -> None:
    """Show the cards due for review."""
    await ensure_db()
    async with async_session() as db:
        store = CardStore(db)
        deck_id = await resolve_deck_id(store, args.owner, args.deck)
        due = await store.fetch_due_cards(args.owner, deck_id, now=utcnow())

    print(f"  {len(due)} cards due")
    for card in due:
        label = "new" if card.review_count == 0 else f"{card.review_count} reviews"
        print(f"    {card.word}  ({label})")


async def cmd_quiz(args: argparse.Namespace) -> None:
    """Run an interactive quiz over the due cards."""
    await ensure_db()
    reviewed = 0

    async with async_session() as db:
        store = CardStore(db)
        deck_id = await resolve_deck_id(store, args.owner, args.deck)
        due = await store.fetch_due_cards(args.owner, deck_id, now=utcnow())

        if not due:
            print("\nNo cards due for review. You're all caught up!")
            return

        print(f"\n  Quiz: {len(due)} cards due")
        print("  Ratings: e=easy (3 days)  m=medium (1 day)  h=hard (again now)")
        print("  Type 'q' to quit\n")

        for i, card in enumerate(due, 1):
            front, back = (card.meaning, card.word) if args.reverse else (card.word, card.meaning)
            print(f"  [{i}/{len(due)}] {front}")
            if input("  Press enter to reveal ").strip().lower() == "q":
                print("\n  Quiz ended early.")
                break
            print(f"  -> {back}")

            answer = input("  Rate [e/m/h]: ").strip().lower()
            if answer == "q":
                print("\n  Quiz ended early.")
                break
            try:
                rating = RATING_KEYS.get(answer, answer)
                updated = await store.rate_card(
                    args.owner, card.id, rating, now=utcnow(), tz=settings.tz
                )
            except InvalidRatingError as exc:
                print(f"  {exc}; card skipped.\n")
                continue
            reviewed += 1
            if updated is not None:
                print(f"  Next review at {updated.next_review_at:%Y-%m-%d %H:%M} UTC\n")

    print(f"\n  Quiz complete. Reviewed: {reviewed}\n")


async def cmd_stats(args: argparse.Namespace) -> None:
    """Show review statistics."""
    await ensure_db()
    async with async_session() as db:
        store = CardStore(db)
        decks = await store.list_decks(args.owner)
        cards = await store.list_cards(args.owner)
    summary = build_dashboard(decks, cards, now=utcnow(), tz=settings.tz)

    streak = f"{summary.streak_days} day{'s' if summary.streak_days != 1 else ''}"
    print("\n  Vocab Deck Statistics")
    print(f"  {'Cards learned:':<20} {summary.total_cards}")
    print(f"  {'Review streak:':<20} {streak}")
    print(f"  {'Pending review:':<20} {summary.due_count}")
    print(f"  {'Reviewed today:':<20} {summary.reviewed_today}")
    print()


async def cmd_seed(args: argparse.Namespace) -> None:
    """Give an empty account a starter set of words."""
    await ensure_db()
    async with async_session() as db:
        inserted = await CardStore(db).seed_if_empty(args.owner, SEED_WORDS)
    if inserted:
        print(f"  Added {inserted} starter cards.")
    else:
        print("  You already have cards; nothing added.")


async def cmd_export(args: argparse.Namespace) -> None:
    """Write cards as CSV to a file, or to stdout with -o -."""
    await ensure_db()
    async with async_session() as db:
        store = CardStore(db)
        deck_id = await resolve_deck_id(store, args.owner, args.deck)
        decks = {deck.id: deck.name for deck in await store.list_decks(args.owner)}
        cards = await store.list_cards(args.owner, deck_id)
    text = cards_to_csv(cards, decks)

    if args.output == "-":
        sys.stdout.write(text)
        return
    path = Path(args.output or export_filename(args.deck))
    path.write_text(UTF8_BOM + text, encoding="utf-8")
    print(f"  Exported {len(cards)} cards to {path}")


def main() -> None:
    """Entry point for the Vocab Deck CLI application."""
    parser = argparse.ArgumentParser(
        prog="vocab_deck",
        description="Vocabulary flashcards with spaced review",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--owner", default=settings.default_owner, help="Card owner (default: %(default)s)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # add
    add_parser = subparsers.add_parser("add", help="Add a new card")
    add_parser.add_argument("word", help="Word or phrase")
    add_parser.add_argument("meaning", help="Meaning or translation")
    add_parser.add_argument("-d", "--deck", default=None, help="Deck name (created if missing)")

    # decks
    subparsers.add_parser("decks", help="List decks")

    # due
    due_parser = subparsers.add_parser("due", help="Show cards due for review")
    due_parser.add_argument("-d", "--deck", default=None, help="Only this deck")

    # quiz
    quiz_parser = subparsers.add_parser("quiz", help="Review due cards")
    quiz_parser.add_argument("-d", "--deck", default=None, help="Only this deck")
    quiz_parser.add_argument(
        "-r", "--reverse", action="store_true", help="Show the meaning, recall the word"
    )

    # stats
    subparsers.add_parser("stats", help="Show your statistics")

    # seed
    subparsers.add_parser("seed", help="Add starter words to an empty account")

    # export
    export_parser = subparsers.add_parser("export", help="Export cards as CSV")
    export_parser.add_argument("-d", "--deck", default=None, help="Only this deck")
    export_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file, or - for stdout (default: flashcards.csv)",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        return

    cmd_map = {
        "add": cmd_add,
        "decks": cmd_decks,
        "due": cmd_due,
        "quiz": cmd_quiz,
        "stats": cmd_stats,
        "seed": cmd_seed,
        "export": cmd_export,
    }

    asyncio.run(cmd_map[args.command](args))


if __name__ == "__main__":
    main()

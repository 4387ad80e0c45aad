"""CSV export of flashcards.

The file has a ``word,meaning,deck`` header and one row per card; the deck
column holds the deck name, empty for uncategorized cards.
"""

import csv
import io
import re
from collections.abc import Iterable, Mapping

from backend.models.flashcard import Flashcard

CSV_HEADER = ("word", "meaning", "deck")

# Spreadsheet apps need the BOM to read the file as UTF-8.
UTF8_BOM = "\ufeff"


def cards_to_csv(cards: Iterable[Flashcard], deck_names: Mapping[int, str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for card in cards:
        deck = deck_names.get(card.deck_id, "") if card.deck_id is not None else ""
        writer.writerow((card.word, card.meaning, deck))
    return buffer.getvalue()


def export_filename(deck_name: str | None = None) -> str:
    """``flashcards.csv``, or ``flashcards-<deck>.csv`` for a single deck."""
    if not deck_name:
        return "flashcards.csv"
    safe = re.sub(r'[\\/:*?"<>|\r\n]+', "_", deck_name).strip() or "deck"
    return f"flashcards-{safe}.csv"

"""
CSV parsing for bulk flashcard set import.

Expected layout: a header row, then one card per line as
Question, Answer, Hint (hint optional). Fields may be double-quoted;
a doubled quote inside a quoted field is a literal quote.
"""
import csv
import logging
from io import StringIO
from typing import List

from flashdrill.core.exceptions import ValidationError
from flashdrill.schemas.flashcard_set import FlashcardInput

logger = logging.getLogger(__name__)


def parse_csv_rows(text: str) -> List[List[str]]:
    """Split CSV text into trimmed rows, dropping blank lines and the header row."""
    reader = csv.reader(StringIO(text))
    rows: List[List[str]] = []
    for row in reader:
        if not row or not any(cell.strip() for cell in row):
            continue
        rows.append([cell.strip() for cell in row])
    return rows[1:]


def parse_flashcard_csv(text: str) -> List[FlashcardInput]:
    """
    Parse uploaded CSV text into card drafts.

    Rows with fewer than two fields, or with an empty question or answer,
    are skipped.

    Raises:
        ValidationError: If no row yields a card
    """
    try:
        rows = parse_csv_rows(text)
    except csv.Error as e:
        raise ValidationError(f"Malformed CSV: {e}") from e

    cards: List[FlashcardInput] = []
    skipped = 0
    for row in rows:
        if len(row) < 2 or not row[0] or not row[1]:
            skipped += 1
            continue
        hint = row[2] if len(row) > 2 and row[2] else None
        cards.append(FlashcardInput(question=row[0], answer=row[1], hint=hint))

    if not cards:
        raise ValidationError("No valid flashcards found in CSV")

    if skipped:
        logger.info(f"Skipped {skipped} CSV row(s) without a question and answer")
    return cards

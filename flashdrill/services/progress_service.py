"""
Progress service for learner-facing reads and attempt log writes.

Statistics are always recomputed from the full attempt log through
mastery_service; this module only loads the rows and enforces access.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportArgumentType=false
import logging
from sqlmodel import Session, select
from typing import List, Tuple

from flashdrill.core.exceptions import NotFoundError
from flashdrill.models import Attempt, Flashcard, FlashcardSet, UserSetAssignment
from flashdrill.services.access_service import require_assignment
from flashdrill.services.mastery_service import (
    CardProgress,
    SetProgress,
    compute_cards_progress,
    compute_set_progress,
)

logger = logging.getLogger(__name__)


def load_cards(session: Session, set_id: int) -> List[Flashcard]:
    """Cards of a set, sorted by their order field."""
    return list(session.exec(
        select(Flashcard).where(Flashcard.set_id == set_id).order_by(Flashcard.order)
    ).all())


def load_attempts(session: Session, user_id: int, set_id: int) -> List[Attempt]:
    """A user's attempts for a set in insertion order."""
    return list(session.exec(
        select(Attempt)
        .where(Attempt.user_id == user_id, Attempt.set_id == set_id)
        .order_by(Attempt.id)
    ).all())


def get_set_progress(session: Session, user_id: int, set_id: int) -> SetProgress:
    """Compute SetProgress for (user, set) without an access check."""
    cards = load_cards(session, set_id)
    attempts = load_attempts(session, user_id, set_id)
    return compute_set_progress(attempts, [card.id for card in cards])


def list_assigned_sets(session: Session, user_id: int) -> List[Tuple[FlashcardSet, SetProgress]]:
    """
    Sets assigned to a user, each with the user's progress.

    Assignments pointing at a set that no longer exists are skipped.
    """
    assignments = session.exec(
        select(UserSetAssignment)
        .where(UserSetAssignment.user_id == user_id)
        .order_by(UserSetAssignment.id)
    ).all()

    results = []
    for assignment in assignments:
        flashcard_set = session.get(FlashcardSet, assignment.set_id)
        if flashcard_set is None:
            continue
        results.append((flashcard_set, get_set_progress(session, user_id, flashcard_set.id)))
    return results


def get_set_for_user(session: Session, user_id: int, set_id: int) -> FlashcardSet:
    """Return a set the user has been assigned."""
    require_assignment(session, user_id, set_id)
    flashcard_set = session.get(FlashcardSet, set_id)
    if flashcard_set is None:
        raise NotFoundError(f"Flashcard set {set_id} not found")
    return flashcard_set


def get_cards_with_progress(
    session: Session,
    user_id: int,
    set_id: int
) -> List[Tuple[Flashcard, CardProgress]]:
    """Cards of an assigned set in display order, each with the user's CardProgress."""
    require_assignment(session, user_id, set_id)
    cards = load_cards(session, set_id)
    attempts = load_attempts(session, user_id, set_id)
    progress = compute_cards_progress([card.id for card in cards], attempts)
    return list(zip(cards, progress))


def record_attempt(
    session: Session,
    user_id: int,
    set_id: int,
    card_id: int,
    correct: bool
) -> Attempt:
    """
    Append one immutable Attempt to the log.

    Raises:
        AccessDeniedError: If the user has no assignment for the set
        NotFoundError: If the card does not belong to the set
    """
    require_assignment(session, user_id, set_id)

    card = session.get(Flashcard, card_id)
    if card is None or card.set_id != set_id:
        raise NotFoundError(f"Card {card_id} not found in flashcard set {set_id}")

    attempt = Attempt(user_id=user_id, set_id=set_id, card_id=card_id, correct=correct)
    session.add(attempt)
    session.commit()
    session.refresh(attempt)

    logger.debug(f"Recorded attempt {attempt.id}: user={user_id} set={set_id} card={card_id} correct={correct}")
    return attempt


def reset_progress(session: Session, user_id: int, set_id: int) -> int:
    """
    Delete every Attempt of a user for a set.

    Not atomic with concurrent inserts: an attempt written while the delete
    runs may survive.

    Returns:
        Number of attempts deleted
    """
    require_assignment(session, user_id, set_id)

    attempts = load_attempts(session, user_id, set_id)
    deleted = len(attempts)
    for attempt in attempts:
        session.delete(attempt)
    session.commit()

    logger.info(f"Reset progress for user {user_id} on set {set_id}: {deleted} attempts deleted")
    return deleted

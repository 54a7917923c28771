"""
Administrative operations on flashcard sets and assignments.

Callers are expected to have passed the admin guard (access_service.require_admin).
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
import logging
from sqlmodel import Session, select, func
from typing import Dict, List, Optional, Sequence, Tuple

from flashdrill.core.exceptions import ConflictError, NotFoundError, ValidationError
from flashdrill.models import Flashcard, FlashcardSet, User, UserSetAssignment
from flashdrill.schemas.flashcard_set import FlashcardInput
from flashdrill.services.access_service import get_assignment

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("Set name must not be empty")
    return cleaned


def get_flashcard_set(session: Session, set_id: int) -> FlashcardSet:
    flashcard_set = session.get(FlashcardSet, set_id)
    if flashcard_set is None:
        raise NotFoundError(f"Flashcard set {set_id} not found")
    return flashcard_set


def create_flashcard_set(
    session: Session,
    admin_id: int,
    name: str,
    description: str,
    cards: Sequence[FlashcardInput]
) -> Tuple[FlashcardSet, int]:
    """
    Create a set and its cards in a single transaction.

    Card order is the 0-based position in `cards`.

    Returns:
        Tuple of (created set, number of cards created)

    Raises:
        ValidationError: If the name is blank or there are no cards
    """
    name = _clean_name(name)
    if not cards:
        raise ValidationError("A flashcard set needs at least one card")

    flashcard_set = FlashcardSet(name=name, description=description.strip(), created_by=admin_id)
    session.add(flashcard_set)
    session.flush()  # assigns flashcard_set.id

    for index, card in enumerate(cards):
        session.add(Flashcard(
            set_id=flashcard_set.id,
            question=card.question,
            answer=card.answer,
            hint=card.hint or None,
            order=index
        ))

    session.commit()
    session.refresh(flashcard_set)

    logger.info(f"Admin {admin_id} created flashcard set {flashcard_set.id} '{name}' with {len(cards)} cards")
    return flashcard_set, len(cards)


def update_flashcard_set(session: Session, set_id: int, name: str, description: str) -> FlashcardSet:
    """Update a set's name and description."""
    flashcard_set = get_flashcard_set(session, set_id)
    flashcard_set.name = _clean_name(name)
    flashcard_set.description = description.strip()

    session.add(flashcard_set)
    session.commit()
    session.refresh(flashcard_set)
    return flashcard_set


def list_all_sets(session: Session) -> List[Tuple[FlashcardSet, int, int]]:
    """
    All sets with their card and assignment counts.

    Returns:
        List of (set, card_count, assigned_users) in creation order
    """
    sets = session.exec(select(FlashcardSet).order_by(FlashcardSet.id)).all()

    card_counts: Dict[int, int] = {
        set_id: count for set_id, count in session.exec(
            select(Flashcard.set_id, func.count(Flashcard.id)).group_by(Flashcard.set_id)
        ).all()
    }
    assignment_counts: Dict[int, int] = {
        set_id: count for set_id, count in session.exec(
            select(UserSetAssignment.set_id, func.count(UserSetAssignment.id))
            .group_by(UserSetAssignment.set_id)
        ).all()
    }

    return [
        (s, card_counts.get(s.id, 0), assignment_counts.get(s.id, 0))
        for s in sets
    ]


def list_users(session: Session) -> List[User]:
    return list(session.exec(select(User).order_by(User.id)).all())


def assign_set_to_user(session: Session, admin_id: int, user_id: int, set_id: int) -> UserSetAssignment:
    """
    Grant a user access to a set.

    Raises:
        NotFoundError: If the user or set does not exist
        ConflictError: If the set is already assigned to the user
    """
    if session.get(User, user_id) is None:
        raise NotFoundError(f"User {user_id} not found")
    get_flashcard_set(session, set_id)

    if get_assignment(session, user_id, set_id) is not None:
        raise ConflictError("Set already assigned to this user")

    assignment = UserSetAssignment(user_id=user_id, set_id=set_id, assigned_by=admin_id)
    session.add(assignment)
    session.commit()
    session.refresh(assignment)

    logger.info(f"Admin {admin_id} assigned set {set_id} to user {user_id}")
    return assignment


def remove_set_assignment(session: Session, user_id: int, set_id: int) -> bool:
    """
    Revoke a user's access to a set. Missing assignments are ignored.

    Attempts are left in place; re-assigning the set restores the user's progress.

    Returns:
        True if an assignment was removed
    """
    assignment = get_assignment(session, user_id, set_id)
    if assignment is None:
        return False

    session.delete(assignment)
    session.commit()
    logger.info(f"Removed assignment of set {set_id} from user {user_id}")
    return True


def get_set_assignments(session: Session, set_id: int) -> List[Tuple[int, Optional[User]]]:
    """Users assigned to a set as (user_id, user) pairs; user is None if it was removed."""
    assignments = session.exec(
        select(UserSetAssignment)
        .where(UserSetAssignment.set_id == set_id)
        .order_by(UserSetAssignment.id)
    ).all()
    return [(a.user_id, session.get(User, a.user_id)) for a in assignments]

"""
Learner endpoints: assigned sets, per-card progress, attempts and reset.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
import logging

from flashdrill.core.database import get_session
from flashdrill.core.identity import get_current_user
from flashdrill.models import User
from flashdrill.schemas.flashcard_set import FlashcardSetResponse
from flashdrill.schemas.progress import (
    AssignedSetsResponse,
    AttemptResponse,
    CardProgressResponse,
    CardsProgressResponse,
    RecordAttemptRequest,
    ResetProgressResponse,
    SetProgressResponse,
)
from flashdrill.services.progress_service import (
    get_cards_with_progress,
    get_set_for_user,
    list_assigned_sets,
    record_attempt,
    reset_progress,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sets", tags=["sets"])


@router.get("", response_model=AssignedSetsResponse)
async def get_assigned_sets(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Sets assigned to the current user with mastery progress (dashboard)."""
    sets = []
    for flashcard_set, progress in list_assigned_sets(session, user.id):
        sets.append(SetProgressResponse(
            id=flashcard_set.id,
            name=flashcard_set.name,
            description=flashcard_set.description,
            total_cards=progress.total_cards,
            reviewed_cards=progress.reviewed_cards,
            correct_cards=progress.correct_cards,
            incorrect_cards=progress.incorrect_cards,
            mastered_cards=progress.mastered_cards,
            progress=progress.progress
        ))
    return AssignedSetsResponse(sets=sets)


@router.get("/{set_id}", response_model=FlashcardSetResponse)
async def get_flashcard_set(
    set_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Get an assigned flashcard set."""
    return FlashcardSetResponse.model_validate(get_set_for_user(session, user.id, set_id))


@router.get("/{set_id}/cards", response_model=CardsProgressResponse)
async def get_flashcards(
    set_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Cards of an assigned set in display order with per-card statistics."""
    cards = [
        CardProgressResponse(
            id=card.id,
            set_id=card.set_id,
            question=card.question,
            answer=card.answer,
            hint=card.hint,
            order=card.order,
            has_been_reviewed=progress.has_been_reviewed,
            last_result=progress.last_result,
            is_mastered=progress.is_mastered,
            correct_count=progress.stats.correct_count,
            incorrect_count=progress.stats.incorrect_count
        )
        for card, progress in get_cards_with_progress(session, user.id, set_id)
    ]
    return CardsProgressResponse(cards=cards)


@router.post("/{set_id}/attempts", response_model=AttemptResponse, status_code=status.HTTP_201_CREATED)
async def record_answer(
    set_id: int,
    request: RecordAttemptRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Record the user's answer for a card."""
    attempt = record_attempt(session, user.id, set_id, request.card_id, request.correct)
    return AttemptResponse.model_validate(attempt)


@router.post("/{set_id}/reset", response_model=ResetProgressResponse)
async def reset_set_progress(
    set_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Delete all of the user's attempts for a set."""
    deleted = reset_progress(session, user.id, set_id)
    return ResetProgressResponse(
        attempts_deleted=deleted,
        message=f"Progress reset ({deleted} attempt(s) deleted)"
    )

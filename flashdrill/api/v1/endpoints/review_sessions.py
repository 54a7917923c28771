"""
Review session endpoints.

A session's card order is fixed when it starts; answering cards during the
session records attempts but never reorders the remaining cards. Every
operation except abandoning re-checks that the set is still assigned.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
import logging

from flashdrill.core.database import get_session
from flashdrill.core.identity import get_current_user
from flashdrill.models import User
from flashdrill.schemas.review_session import ReviewSessionResponse, SubmitAnswerRequest
from flashdrill.services.progress_service import record_attempt
from flashdrill.services.review_session_service import review_sessions

logger = logging.getLogger(__name__)

router = APIRouter(tags=["review-sessions"])


@router.post(
    "/sets/{set_id}/review-sessions",
    response_model=ReviewSessionResponse,
    status_code=status.HTTP_201_CREATED
)
async def start_review_session(
    set_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Start a review session: unmastered cards shuffled first, mastered cards last."""
    review = review_sessions.start(session, user.id, set_id)
    return ReviewSessionResponse.from_session(review)


@router.get("/review-sessions/{session_id}", response_model=ReviewSessionResponse)
async def get_review_session(
    session_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Current state of a review session."""
    return ReviewSessionResponse.from_session(review_sessions.get(session, session_id, user.id))


@router.post("/review-sessions/{session_id}/hint", response_model=ReviewSessionResponse)
async def show_hint(
    session_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Show the hint of the current card."""
    review = review_sessions.get(session, session_id, user.id)
    review.show_hint()
    return ReviewSessionResponse.from_session(review)


@router.post("/review-sessions/{session_id}/reveal", response_model=ReviewSessionResponse)
async def reveal_answer(
    session_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Reveal the answer of the current card. No attempt is recorded."""
    review = review_sessions.get(session, session_id, user.id)
    review.reveal()
    return ReviewSessionResponse.from_session(review)


@router.post("/review-sessions/{session_id}/skip", response_model=ReviewSessionResponse)
async def skip_card(
    session_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Move past the current card without revealing it or recording an attempt."""
    review = review_sessions.get(session, session_id, user.id)
    review.skip()
    return ReviewSessionResponse.from_session(review)


@router.post("/review-sessions/{session_id}/answer", response_model=ReviewSessionResponse)
async def submit_answer(
    session_id: str,
    request: SubmitAnswerRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """
    Record whether the learner got the revealed card right.

    The session does not advance. If the attempt cannot be written the error
    is reported in last_error and the learner can still move on.
    """
    review = review_sessions.get(session, session_id, user.id)

    def recorder(card_id: int, correct: bool):
        try:
            return record_attempt(session, user.id, review.set_id, card_id, correct)
        except Exception:
            session.rollback()
            raise

    review.submit_answer(request.correct, recorder)
    return ReviewSessionResponse.from_session(review)


@router.post("/review-sessions/{session_id}/next", response_model=ReviewSessionResponse)
async def next_card(
    session_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Advance to the next card, completing the session after the last one."""
    review = review_sessions.get(session, session_id, user.id)
    review.advance()
    return ReviewSessionResponse.from_session(review)


@router.delete("/review-sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_review_session(
    session_id: str,
    user: User = Depends(get_current_user)
):
    """Abandon a review session."""
    review_sessions.discard(session_id, user.id)

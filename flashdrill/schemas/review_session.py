"""
Review session schemas.
"""
from pydantic import BaseModel
from typing import List, Optional

from flashdrill.services.review_session_service import ReviewSession, ReviewStatus


class ReviewCardResponse(BaseModel):
    """The card currently presented; the answer is withheld until revealed."""
    id: int
    question: str
    hint: Optional[str] = None
    has_hint: bool = False
    answer: Optional[str] = None


class ReviewSessionResponse(BaseModel):
    """Snapshot of a review session."""
    session_id: str
    set_id: int
    status: ReviewStatus
    position: int
    total: int
    card: Optional[ReviewCardResponse] = None
    hint_visible: bool = False
    submitting: bool = False
    last_answer: Optional[bool] = None
    last_error: Optional[str] = None
    answers_recorded: int = 0
    skipped: int = 0
    order: List[int]

    @classmethod
    def from_session(cls, review: ReviewSession) -> "ReviewSessionResponse":
        card = review.current_card
        card_response = None
        if card is not None:
            card_response = ReviewCardResponse(
                id=card.id,
                question=card.question,
                hint=card.hint if review.hint_visible else None,
                has_hint=bool(card.hint),
                answer=card.answer if review.answer_visible else None,
            )
        return cls(
            session_id=review.session_id,
            set_id=review.set_id,
            status=review.status,
            position=review.position,
            total=len(review.cards),
            card=card_response,
            hint_visible=review.hint_visible,
            submitting=review.submitting,
            last_answer=review.last_answer,
            last_error=review.last_error,
            answers_recorded=review.answers_recorded,
            skipped=review.skipped,
            order=review.order,
        )


class SubmitAnswerRequest(BaseModel):
    """Learner's self-assessment for the revealed card."""
    correct: bool

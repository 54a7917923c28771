"""
Progress schemas for the dashboard and set detail views.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class SetProgressResponse(BaseModel):
    """An assigned set with the learner's aggregate progress."""
    id: int
    name: str
    description: str = ""
    total_cards: int
    reviewed_cards: int = Field(..., description="Distinct cards with at least one attempt")
    correct_cards: int = Field(..., description="Sum of correct attempts")
    incorrect_cards: int = Field(..., description="Sum of incorrect attempts")
    mastered_cards: int
    progress: float = Field(..., description="mastered_cards / total_cards * 100, 0 for an empty set")


class AssignedSetsResponse(BaseModel):
    """Response schema for the dashboard set list."""
    sets: List[SetProgressResponse]


class CardProgressResponse(BaseModel):
    """A card of an assigned set with the learner's per-card statistics."""
    id: int
    set_id: int
    question: str
    answer: str
    hint: Optional[str] = None
    order: int
    has_been_reviewed: bool
    last_result: Optional[bool] = None
    is_mastered: bool
    correct_count: int
    incorrect_count: int


class CardsProgressResponse(BaseModel):
    """Response schema for the set detail view."""
    cards: List[CardProgressResponse]


class RecordAttemptRequest(BaseModel):
    """Request schema for recording an answer."""
    card_id: int
    correct: bool


class AttemptResponse(BaseModel):
    """A recorded attempt."""
    id: int
    set_id: int
    card_id: int
    correct: bool

    class Config:
        from_attributes = True


class ResetProgressResponse(BaseModel):
    """Response schema after resetting progress."""
    attempts_deleted: int
    message: str

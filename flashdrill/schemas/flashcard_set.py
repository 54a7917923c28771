"""
Flashcard set schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class FlashcardInput(BaseModel):
    """One card to be created; its order is its position in the request."""
    question: str = Field(..., min_length=1, description="Question text")
    answer: str = Field(..., min_length=1, description="Answer text")
    hint: Optional[str] = Field(None, description="Optional hint")


class CreateFlashcardSetRequest(BaseModel):
    """Request schema for creating a flashcard set."""
    name: str = Field(..., description="Set name")
    description: str = Field("", description="Set description")
    cards: List[FlashcardInput] = Field(..., description="Cards in display order")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Capitals",
                "description": "European capitals",
                "cards": [
                    {"question": "Capital of France?", "answer": "Paris", "hint": "City of light"},
                    {"question": "Capital of Italy?", "answer": "Rome"}
                ]
            }
        }


class UpdateFlashcardSetRequest(BaseModel):
    """Request schema for updating a set's name and description."""
    name: str
    description: str = ""


class FlashcardSetResponse(BaseModel):
    """Flashcard set response schema."""
    id: int
    name: str
    description: str = ""
    created_by: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CreateFlashcardSetResponse(BaseModel):
    """Response schema after creating a set."""
    set: FlashcardSetResponse
    card_count: int
    message: str


class AdminFlashcardSetResponse(FlashcardSetResponse):
    """Flashcard set with admin statistics."""
    card_count: int = 0
    assigned_users: int = 0


class AdminFlashcardSetsResponse(BaseModel):
    """Response schema for the admin set list."""
    sets: List[AdminFlashcardSetResponse]

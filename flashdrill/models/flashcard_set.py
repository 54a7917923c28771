"""
FlashcardSet model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, timezone

if TYPE_CHECKING:
    from flashdrill.models.flashcard import Flashcard
    from flashdrill.models.user_set_assignment import UserSetAssignment


class FlashcardSet(SQLModel, table=True):
    """FlashcardSet table - a named collection of flashcards created by an admin."""
    __tablename__ = "flashcard_set"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = Field(default="")
    created_by: int = Field(foreign_key="user.id")  # Admin who created the set
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    cards: List["Flashcard"] = Relationship(back_populates="flashcard_set")
    assignments: List["UserSetAssignment"] = Relationship(back_populates="flashcard_set")

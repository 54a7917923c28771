"""
Flashcard model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import UniqueConstraint
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from flashdrill.models.flashcard_set import FlashcardSet


class Flashcard(SQLModel, table=True):
    """Flashcard table - one question/answer pair within a set."""
    __tablename__ = "flashcard"
    __table_args__ = (
        UniqueConstraint("set_id", "order", name="uq_flashcard_set_order"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    set_id: int = Field(foreign_key="flashcard_set.id", index=True)
    question: str
    answer: str
    hint: Optional[str] = None
    order: int  # Display position within the set, unique per set

    # Relationships
    flashcard_set: "FlashcardSet" = Relationship(back_populates="cards")

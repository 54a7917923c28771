"""
UserSetAssignment model - grants a user access to a flashcard set.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import UniqueConstraint
from typing import Optional, TYPE_CHECKING
from datetime import datetime, timezone

if TYPE_CHECKING:
    from flashdrill.models.user import User
    from flashdrill.models.flashcard_set import FlashcardSet


class UserSetAssignment(SQLModel, table=True):
    """UserSetAssignment table - unique per (user, set) pair."""
    __tablename__ = "user_set_assignment"
    __table_args__ = (
        UniqueConstraint("user_id", "set_id", name="uq_user_set_assignment"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    set_id: int = Field(foreign_key="flashcard_set.id", index=True)
    assigned_by: int = Field(foreign_key="user.id")  # Admin who granted access
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    user: "User" = Relationship(
        back_populates="assignments",
        sa_relationship_kwargs={"foreign_keys": "UserSetAssignment.user_id"},
    )
    flashcard_set: "FlashcardSet" = Relationship(back_populates="assignments")

"""
Attempt model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Index
from typing import Optional
from datetime import datetime, timezone


class Attempt(SQLModel, table=True):
    """Attempt table - one immutable correct/incorrect judgment per answer submission.

    Rows are only ever inserted or bulk-deleted on reset. The autoincrement id
    gives the insertion order used for "most recent result".
    """
    __tablename__ = "attempt"
    __table_args__ = (
        Index("ix_attempt_user_set", "user_id", "set_id"),
        Index("ix_attempt_user_set_card", "user_id", "set_id", "card_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id")
    set_id: int = Field(foreign_key="flashcard_set.id")
    card_id: int = Field(foreign_key="flashcard.id")
    correct: bool
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

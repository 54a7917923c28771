"""
User model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, timezone

if TYPE_CHECKING:
    from flashdrill.models.user_set_assignment import UserSetAssignment


class User(SQLModel, table=True):
    """User table - mirrors identities issued by the external identity provider."""
    __tablename__ = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)  # Email address
    name: Optional[str] = Field(default=None)  # Display name
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    assignments: List["UserSetAssignment"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"foreign_keys": "UserSetAssignment.user_id"},
    )

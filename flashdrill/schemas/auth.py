from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional


class RegisterRequest(BaseModel):
    """Registration request schema for an identity issued by the identity provider."""
    email: EmailStr = Field(..., description="Email address")
    name: Optional[str] = Field(None, max_length=200, description="User's display name")


class UserResponse(BaseModel):
    """User response schema."""
    id: int
    email: str
    name: Optional[str] = None
    created_at: Optional[str] = None
    is_admin: bool = False

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Authentication response schema."""
    user: UserResponse
    message: str


class UserSummary(BaseModel):
    """Short user listing for the admin panel."""
    id: int
    email: str
    name: Optional[str] = None

    class Config:
        from_attributes = True


class UsersResponse(BaseModel):
    """Response schema for the admin user list."""
    users: List[UserSummary]


class AssignmentRequest(BaseModel):
    """Request schema for assigning a set to a user."""
    user_id: int
    set_id: int


class SetAssignmentResponse(BaseModel):
    """A user holding an assignment for a set."""
    user_id: int
    email: Optional[str] = None
    name: Optional[str] = None


class SetAssignmentsResponse(BaseModel):
    """Response schema for the assignments of one set."""
    assignments: List[SetAssignmentResponse]

from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from flashdrill.core.database import get_session
from flashdrill.core.identity import get_current_user, get_optional_user
from flashdrill.models import User
from flashdrill.schemas.auth import RegisterRequest, AuthResponse, UserResponse
from flashdrill.services.access_service import is_admin
from flashdrill.services.user_service import register_user

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_response(session: Session, user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at.isoformat(),
        is_admin=is_admin(session, user.id)
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    register_data: RegisterRequest,
    session: Session = Depends(get_session)
):
    """Register the local record for an identity issued by the identity provider."""
    user = register_user(session, register_data.email, register_data.name)
    return AuthResponse(
        user=_user_response(session, user),
        message="Registration successful"
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Return the authenticated user."""
    return _user_response(session, user)


@router.get("/is-admin", response_model=bool)
async def is_current_user_admin(
    user=Depends(get_optional_user),
    session: Session = Depends(get_session)
):
    """Whether the caller is an admin. Never fails; anonymous callers get false."""
    if user is None:
        return False
    return is_admin(session, user.id)

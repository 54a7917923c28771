"""
Request identity dependencies.

Authentication itself happens upstream: the identity provider (or the proxy in
front of the API) forwards the authenticated user id in settings.identity_header.
"""
from fastapi import Depends, Request
from sqlmodel import Session

from flashdrill.core.config import settings
from flashdrill.core.database import get_session
from flashdrill.core.exceptions import AuthenticationError
from flashdrill.models import User
from flashdrill.services.access_service import require_admin


def get_optional_user(request: Request, session: Session = Depends(get_session)):
    """Resolve the forwarded identity to a User, or None if absent or unknown."""
    raw_user_id = request.headers.get(settings.identity_header)
    if not raw_user_id:
        return None
    try:
        user_id = int(raw_user_id)
    except ValueError:
        return None
    return session.get(User, user_id)


def get_current_user(user=Depends(get_optional_user)) -> User:
    """Dependency for endpoints that require an authenticated user."""
    if user is None:
        raise AuthenticationError("Not authenticated")
    return user


def get_admin_user(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
) -> User:
    """Dependency for admin-only endpoints."""
    require_admin(session, user.id)
    return user

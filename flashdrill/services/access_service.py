"""
Authorization guards shared by every user-scoped and admin-scoped operation.
"""
import logging
from sqlmodel import Session, select

from flashdrill.core.exceptions import AccessDeniedError, AuthorizationError
from flashdrill.models import Admin, UserSetAssignment

logger = logging.getLogger(__name__)


def is_admin(session: Session, user_id: int) -> bool:
    """Return True if the user holds an Admin membership."""
    return session.get(Admin, user_id) is not None


def require_admin(session: Session, user_id: int) -> None:
    """Raise AuthorizationError unless the user is an admin."""
    if not is_admin(session, user_id):
        logger.warning(f"User {user_id} attempted an admin operation")
        raise AuthorizationError("Admin access required")


def get_assignment(session: Session, user_id: int, set_id: int):
    """Return the UserSetAssignment for (user, set), or None."""
    return session.exec(
        select(UserSetAssignment).where(
            UserSetAssignment.user_id == user_id,
            UserSetAssignment.set_id == set_id
        )
    ).first()


def require_assignment(session: Session, user_id: int, set_id: int) -> UserSetAssignment:
    """Raise AccessDeniedError unless the user has been assigned the set."""
    assignment = get_assignment(session, user_id, set_id)
    if assignment is None:
        raise AccessDeniedError("You don't have access to this flashcard set")
    return assignment

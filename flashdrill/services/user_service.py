"""
User service for business logic related to user operations.
"""
import logging
from sqlmodel import Session, select
from typing import Optional

from flashdrill.core.exceptions import ConflictError, NotFoundError
from flashdrill.models import Admin, User

logger = logging.getLogger(__name__)


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(select(User).where(User.email == email.lower())).first()


def register_user(session: Session, email: str, name: Optional[str] = None) -> User:
    """
    Create the local record for an identity issued by the identity provider.

    Raises:
        ConflictError: If a user with this email already exists
    """
    if get_user_by_email(session, email) is not None:
        raise ConflictError("Email already exists")

    user = User(email=email.lower(), name=name)
    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info(f"Registered user {user.id} ({user.email})")
    return user


def grant_admin(session: Session, email: str) -> bool:
    """
    Make the user with this email an admin.

    Returns:
        True if the membership was created, False if it already existed

    Raises:
        NotFoundError: If no user has this email
    """
    user = get_user_by_email(session, email)
    if user is None:
        raise NotFoundError(f"User with email {email} not found")

    if session.get(Admin, user.id) is not None:
        return False

    session.add(Admin(user_id=user.id))
    session.commit()
    logger.info(f"Granted admin membership to user {user.id} ({user.email})")
    return True

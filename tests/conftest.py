"""Test configuration."""
import os

# Point the application at an in-memory database before any flashdrill import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from flashdrill.core.config import settings
from flashdrill.core.database import get_session
from flashdrill.main import app
from flashdrill.models import Admin, Flashcard, FlashcardSet, User, UserSetAssignment
from flashdrill.services.review_session_service import review_sessions


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(session: Session) -> Generator[TestClient, None, None]:
    """API client sharing the test database session."""
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    review_sessions.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
    review_sessions.clear()


def auth_headers(user: User) -> Dict[str, str]:
    """Headers the identity provider would forward for this user."""
    return {settings.identity_header: str(user.id)}


def create_user(session: Session, email: str, name: str = None, admin: bool = False) -> User:
    user = User(email=email, name=name)
    session.add(user)
    session.commit()
    session.refresh(user)
    if admin:
        session.add(Admin(user_id=user.id))
        session.commit()
    return user


@pytest.fixture
def admin_user(session: Session) -> User:
    return create_user(session, "admin@example.com", "Admin", admin=True)


@pytest.fixture
def learner(session: Session) -> User:
    return create_user(session, "learner@example.com", "Learner")


@pytest.fixture
def other_learner(session: Session) -> User:
    return create_user(session, "other@example.com", "Other")


@pytest.fixture
def card_set(session: Session, admin_user: User) -> FlashcardSet:
    """A set of five cards; the third one has a hint."""
    flashcard_set = FlashcardSet(name="Capitals", description="European capitals", created_by=admin_user.id)
    session.add(flashcard_set)
    session.commit()
    session.refresh(flashcard_set)

    pairs = [
        ("Capital of France?", "Paris", None),
        ("Capital of Italy?", "Rome", None),
        ("Capital of Spain?", "Madrid", "Starts with M"),
        ("Capital of Portugal?", "Lisbon", None),
        ("Capital of Austria?", "Vienna", None),
    ]
    for order, (question, answer, hint) in enumerate(pairs):
        session.add(Flashcard(set_id=flashcard_set.id, question=question, answer=answer, hint=hint, order=order))
    session.commit()
    return flashcard_set


@pytest.fixture
def cards(session: Session, card_set: FlashcardSet):
    """Cards of card_set in display order."""
    return sorted(card_set.cards, key=lambda card: card.order)


@pytest.fixture
def assignment(session: Session, learner: User, card_set: FlashcardSet, admin_user: User) -> UserSetAssignment:
    assignment = UserSetAssignment(user_id=learner.id, set_id=card_set.id, assigned_by=admin_user.id)
    session.add(assignment)
    session.commit()
    session.refresh(assignment)
    return assignment

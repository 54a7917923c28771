"""
Models package - imports all models so they register with SQLModel.metadata.
"""
from flashdrill.models.user import User
from flashdrill.models.admin import Admin
from flashdrill.models.flashcard_set import FlashcardSet
from flashdrill.models.flashcard import Flashcard
from flashdrill.models.user_set_assignment import UserSetAssignment
from flashdrill.models.attempt import Attempt

__all__ = [
    'User',
    'Admin',
    'FlashcardSet',
    'Flashcard',
    'UserSetAssignment',
    'Attempt',
]

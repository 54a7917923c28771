"""
Admin endpoints: set management, CSV import and assignments.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session
import logging

from flashdrill.core.database import get_session
from flashdrill.core.exceptions import ValidationError
from flashdrill.core.identity import get_admin_user
from flashdrill.models import User
from flashdrill.schemas.auth import (
    AssignmentRequest,
    SetAssignmentResponse,
    SetAssignmentsResponse,
    UserSummary,
    UsersResponse,
)
from flashdrill.schemas.flashcard_set import (
    AdminFlashcardSetResponse,
    AdminFlashcardSetsResponse,
    CreateFlashcardSetRequest,
    CreateFlashcardSetResponse,
    FlashcardSetResponse,
    UpdateFlashcardSetRequest,
)
from flashdrill.services.csv_import_service import parse_flashcard_csv
from flashdrill.services.set_service import (
    assign_set_to_user,
    create_flashcard_set,
    get_flashcard_set,
    get_set_assignments,
    list_all_sets,
    list_users,
    remove_set_assignment,
    update_flashcard_set,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/sets", response_model=AdminFlashcardSetsResponse)
async def get_all_sets(
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """All flashcard sets with card and assignment counts."""
    sets = [
        AdminFlashcardSetResponse(
            id=flashcard_set.id,
            name=flashcard_set.name,
            description=flashcard_set.description,
            created_by=flashcard_set.created_by,
            created_at=flashcard_set.created_at,
            card_count=card_count,
            assigned_users=assigned_users
        )
        for flashcard_set, card_count, assigned_users in list_all_sets(session)
    ]
    return AdminFlashcardSetsResponse(sets=sets)


@router.get("/users", response_model=UsersResponse)
async def get_all_users(
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """All registered users."""
    return UsersResponse(users=[UserSummary.model_validate(u) for u in list_users(session)])


@router.post("/sets", response_model=CreateFlashcardSetResponse, status_code=status.HTTP_201_CREATED)
async def create_set(
    request: CreateFlashcardSetRequest,
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """Create a flashcard set from a list of cards."""
    flashcard_set, card_count = create_flashcard_set(
        session, admin.id, request.name, request.description, request.cards
    )
    return CreateFlashcardSetResponse(
        set=FlashcardSetResponse.model_validate(flashcard_set),
        card_count=card_count,
        message=f"Flashcard set \"{flashcard_set.name}\" created with {card_count} cards"
    )


@router.post("/sets/upload", response_model=CreateFlashcardSetResponse, status_code=status.HTTP_201_CREATED)
async def upload_set(
    name: str = Form(...),
    description: str = Form(""),
    file: UploadFile = File(...),
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """
    Create a flashcard set from an uploaded CSV file.

    The first row is a header; each following row is Question, Answer, Hint (optional).
    """
    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError("CSV file must be UTF-8 encoded") from e

    cards = parse_flashcard_csv(text)
    logger.info(f"Parsed {len(cards)} cards from uploaded file {file.filename}")

    flashcard_set, card_count = create_flashcard_set(session, admin.id, name, description, cards)
    return CreateFlashcardSetResponse(
        set=FlashcardSetResponse.model_validate(flashcard_set),
        card_count=card_count,
        message=f"Flashcard set \"{flashcard_set.name}\" created with {card_count} cards"
    )


@router.put("/sets/{set_id}", response_model=FlashcardSetResponse)
async def update_set(
    set_id: int,
    request: UpdateFlashcardSetRequest,
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """Update a set's name and description."""
    flashcard_set = update_flashcard_set(session, set_id, request.name, request.description)
    return FlashcardSetResponse.model_validate(flashcard_set)


@router.post("/assignments", status_code=status.HTTP_201_CREATED)
async def assign_set(
    request: AssignmentRequest,
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """Assign a set to a user."""
    assignment = assign_set_to_user(session, admin.id, request.user_id, request.set_id)
    return {
        "user_id": assignment.user_id,
        "set_id": assignment.set_id,
        "message": "Set assigned"
    }


@router.delete("/assignments")
async def remove_assignment(
    user_id: int,
    set_id: int,
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """Remove a set assignment. Removing a missing assignment is not an error."""
    removed = remove_set_assignment(session, user_id, set_id)
    return {"removed": removed}


@router.get("/sets/{set_id}/assignments", response_model=SetAssignmentsResponse)
async def get_assignments_for_set(
    set_id: int,
    admin: User = Depends(get_admin_user),
    session: Session = Depends(get_session)
):
    """Users who have been assigned a set."""
    get_flashcard_set(session, set_id)
    assignments = [
        SetAssignmentResponse(
            user_id=user_id,
            email=user.email if user else None,
            name=user.name if user else None
        )
        for user_id, user in get_set_assignments(session, set_id)
    ]
    return SetAssignmentsResponse(assignments=assignments)

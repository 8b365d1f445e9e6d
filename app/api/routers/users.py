"""
User management API endpoints.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store, get_principal
from app.api.models.common import InsertResponse, MessageResponse
from app.api.models.user import UserCreate, UserProfile, UserResponse
from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.database import crud
from app.database.connection import DocumentStore

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=InsertResponse | MessageResponse)
def create_user(user_in: UserCreate, store: DocumentStore = Depends(get_store)):
    """Register a user once per email; repeat calls are a no-op."""
    if not user_in.email:
        raise ValidationError("Email is required")
    inserted_id = crud.create_user(store, user_in.model_dump(exclude_unset=True))
    if inserted_id is None:
        return MessageResponse(message="User already exists. Do not need to insert again")
    return InsertResponse(insertedId=inserted_id)


@router.get("/{email}", response_model=UserProfile)
def get_user(
    email: str,
    principal: str = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Get the caller's own profile."""
    if email != principal:
        raise Forbidden("Unauthorized access")
    user = crud.get_user_by_email(store, email)
    if not user:
        raise NotFound("User not found")
    return UserProfile(image=user.get("image"), name=user.get("name"))


@router.get("", response_model=list[UserResponse])
def list_users(store: DocumentStore = Depends(get_store)):
    """List all users."""
    return [UserResponse.model_validate(u) for u in crud.get_users(store)]

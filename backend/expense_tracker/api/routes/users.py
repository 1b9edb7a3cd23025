"""
User management routes.
"""
from fastapi import APIRouter, Depends, Response, status
from expense_tracker.core.exceptions import UserNotFoundError
from expense_tracker.schemas.user import UserCreate, UserResponse
from expense_tracker.core.identifiers import clean_and_validate_id
from expense_tracker.services.user_service import create_user
from expense_tracker.stores.interface import UserStore
from expense_tracker.api.dependencies import get_user_store

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: UserCreate,
    response: Response,
    user_store: UserStore = Depends(get_user_store)
):
    """Register a new user and point to their expense form."""
    user = create_user(user_data.username, user_data.email, user_store)
    response.headers["Location"] = f"/api/users/{user.id}/expenses"
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_store: UserStore = Depends(get_user_store)
):
    """Get user by ID."""
    valid_id = clean_and_validate_id(user_id)
    user = user_store.find_by_id(valid_id) if valid_id else None
    if not user:
        raise UserNotFoundError()
    return user

"""
User service for registration.
"""
import logging

from expense_tracker.core.exceptions import ValidationError
from expense_tracker.schemas.user import UserResponse
from expense_tracker.stores.interface import UserStore

logger = logging.getLogger(__name__)


def create_user(username: str, email: str, user_store: UserStore) -> UserResponse:
    """Register a user; username and email must be non-empty and unused."""
    missing = [
        name for name, value in (("username", username), ("email", email))
        if not isinstance(value, str) or not value
    ]
    if missing:
        logger.warning(f"Rejected user creation, missing {missing}")
        raise ValidationError("Error creating user", details={"missing": missing})

    # Check if username already exists
    if user_store.find_by_username(username):
        logger.warning(f"Rejected user creation, username '{username}' taken")
        raise ValidationError("Username already exists")

    # Check if email already exists
    if user_store.find_by_email(email):
        logger.warning(f"Rejected user creation, email '{email}' taken")
        raise ValidationError("Email already exists")

    # The store's unique constraint still decides concurrent duplicates
    user = user_store.create(username=username, email=email)
    logger.info(f"Created user {user.id}")
    return user

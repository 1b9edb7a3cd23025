"""
Request context resolution: turn raw identifier candidates into a user.
"""
import logging
from typing import Any, Iterable, Optional

from expense_tracker.core.identifiers import clean_and_validate_id
from expense_tracker.schemas.user import UserResponse
from expense_tracker.stores.interface import UserStore

logger = logging.getLogger(__name__)


def resolve_context_user(
    candidates: Iterable[Any],
    user_store: UserStore
) -> Optional[UserResponse]:
    """
    Resolve the user a request is scoped to.

    Candidates are given in precedence order (route parameter, then body
    field); the first non-empty one is validated and looked up. Any failure
    leaves the user unresolved, it never fails the request.
    """
    raw_id = next((c for c in candidates if c), None)
    user_id = clean_and_validate_id(raw_id)
    if not user_id:
        return None

    try:
        user = user_store.find_by_id(user_id)
    except Exception as e:
        logger.warning(f"Could not resolve user {user_id}: {e}", exc_info=True)
        return None

    if not user:
        logger.debug(f"No user found for identifier {user_id}")
    return user

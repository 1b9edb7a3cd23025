"""
Error taxonomy shared by stores, workflows and the HTTP layer.

Every error carries the HTTP status it maps to, so route handlers can let
them propagate and the exception handlers in ``main`` render the envelope.
"""
from typing import Any, Optional
from fastapi import status


class ExpenseTrackerError(Exception):
    """Base exception for expense tracker failures."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return self.status_code < 500


class ValidationError(ExpenseTrackerError):
    """Required field missing, wrong type, or uniqueness violated."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class MissingUserError(ExpenseTrackerError):
    """No usable user identifier could be resolved."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User ID required"


class UserNotFoundError(ExpenseTrackerError):
    """Identifier is well formed but no user has it."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class StoreUnavailableError(ExpenseTrackerError):
    """Storage backend failed or could not be reached."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage unavailable"

"""
Abstract store interfaces.

Workflows only talk to these contracts, so the SQL tables can be swapped for
the in-memory stores (tests, ``STORE_BACKEND=memory``) without touching them.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from expense_tracker.core.exceptions import ValidationError
from expense_tracker.schemas.expense import ExpenseResponse
from expense_tracker.schemas.user import UserResponse


def check_required_fields(entity: str, fields: Dict[str, Any]):
    """
    Raise ValidationError if any required field is missing.

    None and the empty string both count as missing.
    """
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ValidationError(
            f"{entity} validation failed: missing {', '.join(missing)}",
            details={"missing": missing},
        )


def coerce_amount(amount: Any) -> Any:
    """
    Convert an amount to float, raising ValidationError if it is not numeric.

    Missing amounts pass through untouched for check_required_fields.
    """
    if amount is None or amount == "":
        return amount
    try:
        if isinstance(amount, bool):
            raise TypeError("bool is not an amount")
        return float(amount)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "Expense validation failed: amount must be a number",
            details={"invalid": ["amount"]},
        ) from e


class UserStore(ABC):
    """Persistence of users, unique by username and by email."""

    @abstractmethod
    def create(self, username: str, email: str) -> UserResponse:
        """
        Create a user.

        Raises:
            ValidationError: If a field is missing or username/email is taken
            StoreUnavailableError: If the backend fails
        """

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[UserResponse]:
        """Return the user with this identifier, or None."""

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[UserResponse]:
        """Return the user with this username, or None."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserResponse]:
        """Return the user with this email, or None."""


class ExpenseStore(ABC):
    """Persistence of expenses keyed by owning user."""

    @abstractmethod
    def create(
        self,
        user_id: str,
        title: str,
        amount: float,
        category: str,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> ExpenseResponse:
        """
        Create an expense; ``date`` defaults to the current time.

        Raises:
            ValidationError: If a required field is missing
            StoreUnavailableError: If the backend fails
        """

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[ExpenseResponse]:
        """Return the user's expenses ordered by date, most recent first."""

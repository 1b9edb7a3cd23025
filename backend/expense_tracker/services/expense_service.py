"""
Expense service for expense-related business logic.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from expense_tracker.core.exceptions import MissingUserError, UserNotFoundError
from expense_tracker.core.identifiers import clean_and_validate_id
from expense_tracker.core.utils import format_display_date
from expense_tracker.schemas.expense import (
    ExpenseFormResponse,
    ExpenseHistoryItem,
    ExpenseHistoryResponse,
)
from expense_tracker.schemas.user import UserResponse
from expense_tracker.stores.interface import ExpenseStore, UserStore

logger = logging.getLogger(__name__)

EXPENSE_SAVED_MESSAGE = "Expense saved successfully."


def _to_utc_naive(value: datetime) -> datetime:
    """Stored dates are naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def get_expense_form(
    raw_user_id: Any = None,
    context_user: Optional[UserResponse] = None
) -> ExpenseFormResponse:
    """Context for the expense-submission form."""
    user_id = context_user.id if context_user else clean_and_validate_id(raw_user_id)
    return ExpenseFormResponse(user_id=user_id, message=None, show_history_choice=False)


def record_expense(
    user_store: UserStore,
    expense_store: ExpenseStore,
    raw_user_id: Any = None,
    context_user: Optional[UserResponse] = None,
    title: Optional[str] = None,
    amount: Optional[float] = None,
    category: Optional[str] = None,
    description: Optional[str] = None,
    expense_date: Optional[datetime] = None
) -> ExpenseFormResponse:
    """
    Record an expense for a user.

    A valid raw identifier wins over the resolved context user. The user must
    exist; field checks happen in the store. Returns the confirmation shown
    with the option to view history.
    """
    user_id = clean_and_validate_id(raw_user_id) or (context_user.id if context_user else None)
    if not user_id:
        raise MissingUserError()

    user = user_store.find_by_id(user_id)
    if not user:
        logger.info(f"Rejected expense for unknown user {user_id}")
        raise UserNotFoundError()

    expense = expense_store.create(
        user_id=user.id,
        title=title,
        amount=amount,
        category=category,
        description=description,
        date=_to_utc_naive(expense_date) if expense_date else datetime.utcnow()
    )
    logger.info(f"Recorded expense {expense.id} for user {user.id}")

    return ExpenseFormResponse(
        user_id=user.id,
        message=EXPENSE_SAVED_MESSAGE,
        show_history_choice=True
    )


def get_expense_history(
    expense_store: ExpenseStore,
    raw_user_id: Any = None,
    context_user: Optional[UserResponse] = None,
    date_format: str = "{month}/{day}/{year}"
) -> ExpenseHistoryResponse:
    """Expenses of a user, most recent first, each with a display date."""
    user_id = context_user.id if context_user else clean_and_validate_id(raw_user_id)
    if not user_id:
        raise MissingUserError()

    expenses = expense_store.find_by_user_id(user_id)
    items = [
        ExpenseHistoryItem(
            **expense.model_dump(),
            formatted_date=format_display_date(expense.date, date_format)
        )
        for expense in expenses
    ]
    return ExpenseHistoryResponse(user_id=user_id, expenses=items)

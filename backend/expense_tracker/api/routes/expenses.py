"""
Expense submission and history routes, scoped to one user.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from expense_tracker.schemas.expense import (
    ExpenseCreate,
    ExpenseFormResponse,
    ExpenseHistoryResponse,
)
from expense_tracker.schemas.user import UserResponse
from expense_tracker.services.expense_service import (
    get_expense_form,
    get_expense_history,
    record_expense,
)
from expense_tracker.stores.interface import ExpenseStore, UserStore
from expense_tracker.api.dependencies import get_context_user, get_expense_store, get_user_store

router = APIRouter(prefix="/users/{user_id}/expenses", tags=["expenses"])


@router.get("", response_model=ExpenseFormResponse)
async def expense_form(
    user_id: str,
    context_user: Optional[UserResponse] = Depends(get_context_user)
):
    """Context for the expense form of a user."""
    return get_expense_form(raw_user_id=user_id, context_user=context_user)


@router.post("", response_model=ExpenseFormResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    user_id: str,
    expense_data: ExpenseCreate,
    context_user: Optional[UserResponse] = Depends(get_context_user),
    user_store: UserStore = Depends(get_user_store),
    expense_store: ExpenseStore = Depends(get_expense_store)
):
    """Record an expense; a ``userId`` in the body overrides the URL."""
    return record_expense(
        user_store,
        expense_store,
        raw_user_id=expense_data.user_id or user_id,
        context_user=context_user,
        title=expense_data.title,
        amount=expense_data.amount,
        category=expense_data.category,
        description=expense_data.description,
        expense_date=expense_data.date
    )


@router.get("/history", response_model=ExpenseHistoryResponse)
async def expense_history(
    user_id: str,
    request: Request,
    context_user: Optional[UserResponse] = Depends(get_context_user),
    expense_store: ExpenseStore = Depends(get_expense_store)
):
    """Expense history of a user, most recent first."""
    return get_expense_history(
        expense_store,
        raw_user_id=user_id,
        context_user=context_user,
        date_format=request.app.state.settings.DISPLAY_DATE_FORMAT
    )

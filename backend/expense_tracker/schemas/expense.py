"""
Pydantic schemas for Expense entity.
"""
from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime


class ExpenseCreate(BaseModel):
    """Schema for expense submission.

    Required fields (title, amount, category) are enforced by the store so
    that user resolution runs first; here only types are checked.
    """
    title: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[datetime] = None
    # Overrides the user in the URL only when it is a valid identifier
    user_id: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("userId", "user_id"),
    )

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_is_unset(cls, v):
        """An empty date field means "now"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ExpenseResponse(BaseModel):
    """Schema for a stored expense."""
    id: str
    user_id: str = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    title: str
    amount: float
    description: Optional[str] = None
    category: str
    date: datetime

    model_config = {"from_attributes": True}


class ExpenseHistoryItem(ExpenseResponse):
    """Stored expense plus its display-formatted date."""
    formatted_date: str = Field(
        default="",
        validation_alias=AliasChoices("formatted_date", "formattedDate"),
        serialization_alias="formattedDate",
    )


class ExpenseFormResponse(BaseModel):
    """Context for the expense-submission view, also used as the confirmation."""
    user_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    message: Optional[str] = None
    show_history_choice: bool = Field(
        default=False,
        validation_alias=AliasChoices("show_history_choice", "showHistoryChoice"),
        serialization_alias="showHistoryChoice",
    )


class ExpenseHistoryResponse(BaseModel):
    """Expenses for one user, most recent first."""
    user_id: str = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    expenses: List[ExpenseHistoryItem] = []

"""
SQLAlchemy-backed stores.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from expense_tracker.core.exceptions import StoreUnavailableError, ValidationError
from expense_tracker.models.expense import Expense
from expense_tracker.models.user import User
from expense_tracker.schemas.expense import ExpenseResponse
from expense_tracker.schemas.user import UserResponse
from expense_tracker.stores.interface import ExpenseStore, UserStore, check_required_fields, coerce_amount

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(db: Session, action: str):
    """Roll back and translate SQLAlchemy errors into store errors."""
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity violation while trying to {action}: {e.orig}")
        raise ValidationError(f"Could not {action}: duplicate or invalid value") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while trying to {action}: {e}", exc_info=True)
        raise StoreUnavailableError(f"Could not {action}") from e


class SQLUserStore(UserStore):
    """User store over the ``users`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, username: str, email: str) -> UserResponse:
        check_required_fields("User", {"username": username, "email": email})
        user = User(username=username, email=email)
        with _store_errors(self.db, "create user"):
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return UserResponse.model_validate(user)

    def find_by_id(self, user_id: str) -> Optional[UserResponse]:
        with _store_errors(self.db, "load user"):
            user = self.db.query(User).filter(User.id == user_id.lower()).first()
        return UserResponse.model_validate(user) if user else None

    def find_by_username(self, username: str) -> Optional[UserResponse]:
        with _store_errors(self.db, "load user"):
            user = self.db.query(User).filter(User.username == username).first()
        return UserResponse.model_validate(user) if user else None

    def find_by_email(self, email: str) -> Optional[UserResponse]:
        with _store_errors(self.db, "load user"):
            user = self.db.query(User).filter(User.email == email).first()
        return UserResponse.model_validate(user) if user else None


class SQLExpenseStore(ExpenseStore):
    """Expense store over the ``expenses`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: str,
        title: str,
        amount: float,
        category: str,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> ExpenseResponse:
        amount = coerce_amount(amount)
        check_required_fields(
            "Expense",
            {"userId": user_id, "title": title, "amount": amount, "category": category},
        )
        expense = Expense(
            user_id=user_id.lower(),
            title=title,
            amount=amount,
            description=description,
            category=category,
            date=date or datetime.utcnow()
        )
        with _store_errors(self.db, "create expense"):
            self.db.add(expense)
            self.db.commit()
            self.db.refresh(expense)
        return ExpenseResponse.model_validate(expense)

    def find_by_user_id(self, user_id: str) -> List[ExpenseResponse]:
        with _store_errors(self.db, "load expenses"):
            expenses = self.db.query(Expense).filter(
                Expense.user_id == user_id.lower()
            ).order_by(Expense.date.desc(), Expense.id.desc()).all()
        return [ExpenseResponse.model_validate(e) for e in expenses]

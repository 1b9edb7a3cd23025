"""
In-memory stores sharing one lock, for tests and ``STORE_BACKEND=memory``.
"""
import threading
from datetime import datetime
from typing import Dict, List, Optional

from expense_tracker.core.exceptions import ValidationError
from expense_tracker.core.identifiers import new_object_id
from expense_tracker.schemas.expense import ExpenseResponse
from expense_tracker.schemas.user import UserResponse
from expense_tracker.stores.interface import ExpenseStore, UserStore, check_required_fields, coerce_amount


class InMemoryUserStore(UserStore):

    def __init__(self, lock: threading.Lock):
        self._lock = lock
        self._users: Dict[str, UserResponse] = {}

    def create(self, username: str, email: str) -> UserResponse:
        check_required_fields("User", {"username": username, "email": email})
        with self._lock:
            for existing in self._users.values():
                if existing.username == username:
                    raise ValidationError("Username already exists")
                if existing.email == email:
                    raise ValidationError("Email already exists")
            user = UserResponse(id=new_object_id(), username=username, email=email)
            self._users[user.id] = user
        return user.model_copy()

    def find_by_id(self, user_id: str) -> Optional[UserResponse]:
        with self._lock:
            user = self._users.get(user_id.lower())
        return user.model_copy() if user else None

    def find_by_username(self, username: str) -> Optional[UserResponse]:
        with self._lock:
            user = next((u for u in self._users.values() if u.username == username), None)
        return user.model_copy() if user else None

    def find_by_email(self, email: str) -> Optional[UserResponse]:
        with self._lock:
            user = next((u for u in self._users.values() if u.email == email), None)
        return user.model_copy() if user else None


class InMemoryExpenseStore(ExpenseStore):

    def __init__(self, lock: threading.Lock):
        self._lock = lock
        self._expenses: List[ExpenseResponse] = []

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
        expense = ExpenseResponse(
            id=new_object_id(),
            user_id=user_id.lower(),
            title=title,
            amount=amount,
            description=description,
            category=category,
            date=date or datetime.utcnow(),
        )
        with self._lock:
            self._expenses.append(expense)
        return expense.model_copy()

    def find_by_user_id(self, user_id: str) -> List[ExpenseResponse]:
        with self._lock:
            matching = [e for e in self._expenses if e.user_id == user_id.lower()]
        matching.sort(key=lambda e: (e.date, e.id), reverse=True)
        return [e.model_copy() for e in matching]


class InMemoryStore:
    """Pair of in-memory user and expense stores."""

    def __init__(self):
        lock = threading.Lock()
        self.users = InMemoryUserStore(lock)
        self.expenses = InMemoryExpenseStore(lock)

"""
Shared FastAPI dependencies: sessions, stores and the context user.
"""
from typing import Iterator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from expense_tracker.schemas.user import UserResponse
from expense_tracker.services.identity_service import resolve_context_user
from expense_tracker.stores.interface import ExpenseStore, UserStore
from expense_tracker.stores.sql import SQLExpenseStore, SQLUserStore


def get_db(request: Request) -> Iterator[Optional[Session]]:
    """Dependency for getting a database session (None for the memory backend)."""
    session_factory = request.app.state.session_factory
    if session_factory is None:
        yield None
        return
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_store(
    request: Request,
    db: Optional[Session] = Depends(get_db)
) -> UserStore:
    """User store for the configured backend."""
    memory_store = request.app.state.memory_store
    if memory_store is not None:
        return memory_store.users
    return SQLUserStore(db)


def get_expense_store(
    request: Request,
    db: Optional[Session] = Depends(get_db)
) -> ExpenseStore:
    """Expense store for the configured backend."""
    memory_store = request.app.state.memory_store
    if memory_store is not None:
        return memory_store.expenses
    return SQLExpenseStore(db)


async def _body_user_id(request: Request):
    """The ``userId`` field of a JSON body, if any."""
    if "application/json" not in request.headers.get("content-type", ""):
        return None
    if not await request.body():
        return None
    try:
        body = await request.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("userId") or body.get("user_id")
    return None


async def get_context_user(
    user_id: str,
    request: Request,
    user_store: UserStore = Depends(get_user_store)
) -> Optional[UserResponse]:
    """Resolve the user in scope from the route parameter, then the body."""
    return resolve_context_user([user_id, await _body_user_id(request)], user_store)

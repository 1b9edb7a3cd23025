"""Stores package - contracts and their SQL / in-memory implementations."""
from expense_tracker.stores.interface import UserStore, ExpenseStore
from expense_tracker.stores.sql import SQLUserStore, SQLExpenseStore
from expense_tracker.stores.memory import InMemoryStore, InMemoryUserStore, InMemoryExpenseStore

__all__ = [
    "UserStore",
    "ExpenseStore",
    "SQLUserStore",
    "SQLExpenseStore",
    "InMemoryStore",
    "InMemoryUserStore",
    "InMemoryExpenseStore",
]

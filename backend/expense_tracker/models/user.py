"""
User model for registered expense owners.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from expense_tracker.db.base import BaseModel


class User(BaseModel):
    """User model; username and email are each unique."""
    __tablename__ = "users"

    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)

    # Relationships
    expenses = relationship("Expense", back_populates="user")

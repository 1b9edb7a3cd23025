"""
Expense model for tracking spending.
"""
from datetime import datetime
from sqlalchemy import Column, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from expense_tracker.core.identifiers import OBJECT_ID_LENGTH
from expense_tracker.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event."""
    __tablename__ = "expenses"

    user_id = Column(String(OBJECT_ID_LENGTH), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False)
    date = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="expenses")

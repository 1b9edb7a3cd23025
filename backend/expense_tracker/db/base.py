"""
Declarative base and columns shared by every table.
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from expense_tracker.core.identifiers import OBJECT_ID_LENGTH, new_object_id

Base = declarative_base()


class BaseModel(Base):
    """Abstract base with a document-style identifier and timestamps."""
    __abstract__ = True

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

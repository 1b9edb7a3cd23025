"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel
from typing import Optional


class UserCreate(BaseModel):
    """Schema for user creation; presence is checked by the workflow."""
    username: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response."""
    id: str
    username: str
    email: str

    model_config = {"from_attributes": True}

"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from expense_tracker.api.routes import users, expenses

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(expenses.router)

"""API routes."""
from fastapi import APIRouter
from goal_tracker.api import auth, goals

api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(goals.router, prefix="/goals", tags=["Goals"])

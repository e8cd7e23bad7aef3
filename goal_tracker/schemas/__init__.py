"""Pydantic schemas for request/response models."""
from goal_tracker.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    UserResponse,
    TokenPayload,
)
from goal_tracker.schemas.goal import (
    GoalCreate,
    GoalUpdate,
    GoalResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "UserResponse",
    "TokenPayload",
    "GoalCreate",
    "GoalUpdate",
    "GoalResponse",
]

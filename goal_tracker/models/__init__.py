"""SQLAlchemy models."""
from goal_tracker.models.user import User
from goal_tracker.models.goal import Goal
from goal_tracker.models.token import AuthToken

__all__ = ["User", "Goal", "AuthToken"]

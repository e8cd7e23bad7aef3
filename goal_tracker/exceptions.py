"""Domain errors raised by the services and converted at the request boundary."""


class GoalTrackerError(Exception):
    """Base class for application errors."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(GoalTrackerError):
    """Malformed or missing input."""


class AuthenticationError(GoalTrackerError):
    """Missing or invalid credentials or token."""


class AuthorizationError(GoalTrackerError):
    """Valid caller, but the resource belongs to another user."""


class NotFoundError(GoalTrackerError):
    """No such record."""

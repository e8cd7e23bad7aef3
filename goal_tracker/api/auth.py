"""Authentication API routes."""
from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from goal_tracker.database import get_db
from goal_tracker.exceptions import AuthenticationError
from goal_tracker.models.user import User
from goal_tracker.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    UserResponse,
)
from goal_tracker.services import auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return credentials.credentials


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Dependency to get the current authenticated user."""
    token = _bearer_token(credentials)
    user = await auth_service.resolve_caller(db, token)
    if user is None:
        raise AuthenticationError("Invalid or expired token")
    return user


async def get_token_owner(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Dependency resolving the user a validly signed token was issued to,
    whether or not it has since been revoked. Used by logout only.
    """
    payload = auth_service.decode_access_token(_bearer_token(credentials))
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    user = await auth_service.get_user_by_id(db, payload.sub)
    if user is None:
        raise AuthenticationError("User not found")
    return user


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create an account."""
    return await auth_service.register_user(db, request)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, db: AsyncSession = Depends(get_db)):
    """User login endpoint."""
    token = await auth_service.login(db, request.email, request.password)
    return LoginResponse(token=token)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_token_owner),
):
    """Revoke all of the caller's tokens."""
    await auth_service.logout(db, current_user)
    return LogoutResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user

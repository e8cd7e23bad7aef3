"""Authentication schemas."""
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """Registration request schema."""
    name: str = Field(max_length=255)
    email: EmailStr
    password: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class LoginRequest(BaseModel):
    """Login request schema."""
    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response with bearer token."""
    token: str
    token_type: str = "bearer"


class LogoutResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: int  # user_id
    jti: str
    exp: datetime

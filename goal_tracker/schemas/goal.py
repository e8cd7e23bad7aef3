"""Goal schemas."""
import re
from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

TITLE_MAX_LENGTH = 255

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _clean_title(value: Optional[str]) -> str:
    if value is None:
        raise ValueError("title may not be null")
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


def _check_due_date(value: Any) -> Any:
    # Only YYYY-MM-DD strings; numbers would otherwise pass as Unix timestamps
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE.match(value):
        raise ValueError("due_date must be a date in YYYY-MM-DD format")
    return value


class GoalCreate(BaseModel):
    """Schema for creating a goal. Unknown fields are ignored."""
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> str:
        return _clean_title(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> Any:
        return _check_due_date(value)


class GoalUpdate(BaseModel):
    """
    Schema for a partial goal update.

    Only fields present in the payload are applied. ``title`` may not be
    cleared; ``description`` and ``due_date`` may be set to null.
    """
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> str:
        return _clean_title(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> Any:
        return _check_due_date(value)


class GoalResponse(BaseModel):
    """Goal response schema."""
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

"""Goals API routes."""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from goal_tracker.database import get_db
from goal_tracker.api.auth import get_current_user
from goal_tracker.models.user import User
from goal_tracker.schemas.goal import GoalCreate, GoalUpdate, GoalResponse
from goal_tracker.services import goal_service

router = APIRouter()


@router.get("", response_model=List[GoalResponse])
async def list_goals(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the caller's goals."""
    return await goal_service.list_goals(db, current_user)


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    data: GoalCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a new goal."""
    return await goal_service.create_goal(db, current_user, data)


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get a goal by ID."""
    return await goal_service.get_goal(db, current_user, goal_id)


@router.put("/{goal_id}", response_model=GoalResponse)
@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: int,
    data: GoalUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update a goal.

    Can update: title, description, due_date
    """
    return await goal_service.update_goal(db, current_user, goal_id, data)


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a goal."""
    await goal_service.delete_goal(db, current_user, goal_id)

"""Goal service. Every operation is scoped to the calling user."""
import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from goal_tracker.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from goal_tracker.models.goal import Goal
from goal_tracker.models.user import User
from goal_tracker.schemas.goal import GoalCreate, GoalUpdate

logger = logging.getLogger(__name__)

# Largest value a 64-bit INTEGER primary key can hold
MAX_GOAL_ID = 2**63 - 1


def _require_caller(caller: Optional[User]) -> User:
    if caller is None:
        raise AuthenticationError("Not authenticated")
    return caller


async def list_goals(db: AsyncSession, caller: Optional[User]) -> List[Goal]:
    """Get the caller's goals in insertion order."""
    caller = _require_caller(caller)
    result = await db.execute(
        select(Goal).where(Goal.user_id == caller.id).order_by(Goal.id)
    )
    return result.scalars().all()


async def create_goal(db: AsyncSession, caller: Optional[User], data: GoalCreate) -> Goal:
    """Create a new goal owned by the caller."""
    caller = _require_caller(caller)
    goal = Goal(
        user_id=caller.id,
        title=data.title,
        description=data.description,
        due_date=data.due_date,
    )
    db.add(goal)
    await db.commit()
    await db.refresh(goal)

    logger.info("User id=%s created goal id=%s", caller.id, goal.id)
    return goal


async def get_goal(db: AsyncSession, caller: Optional[User], goal_id: int) -> Goal:
    """
    Get one of the caller's goals.

    Existence is checked before ownership.

    Raises:
        NotFoundError: no goal with that id.
        AuthorizationError: the goal belongs to another user.
    """
    caller = _require_caller(caller)
    if not 1 <= goal_id <= MAX_GOAL_ID:
        raise NotFoundError("Goal not found")

    result = await db.execute(select(Goal).where(Goal.id == goal_id))
    goal = result.scalar_one_or_none()

    if goal is None:
        raise NotFoundError("Goal not found")
    if goal.user_id != caller.id:
        logger.warning(
            "User id=%s denied access to goal id=%s owned by user id=%s",
            caller.id, goal.id, goal.user_id,
        )
        raise AuthorizationError("Goal not found")
    return goal


async def update_goal(
    db: AsyncSession,
    caller: Optional[User],
    goal_id: int,
    data: GoalUpdate,
) -> Goal:
    """Apply a partial update to one of the caller's goals."""
    goal = await get_goal(db, caller, goal_id)

    update_data = data.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(goal, key, value)

    await db.commit()
    await db.refresh(goal)

    logger.info("User id=%s updated goal id=%s (%s)", caller.id, goal.id, ", ".join(update_data))
    return goal


async def delete_goal(db: AsyncSession, caller: Optional[User], goal_id: int) -> None:
    """Delete one of the caller's goals."""
    goal = await get_goal(db, caller, goal_id)

    await db.delete(goal)
    await db.commit()
    logger.info("User id=%s deleted goal id=%s", caller.id, goal_id)

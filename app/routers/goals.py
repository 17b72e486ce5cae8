"""Goal router - API endpoints for goal management."""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.exceptions import GoalNotFoundError
from app.models.goal import Goal, GoalAdjust, GoalCreate, GoalCurrent, GoalUpdate
from app.services.goal_service import GoalService
from app.store import get_goal_store


router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: Optional[GoalCreate] = None,
    store=Depends(get_goal_store),
):
    """
    Add a goal.

    - Body is optional; missing fields take the default record
    - Assigns the next id from the store counter
    """
    service = GoalService(store)
    return service.add_goal(goal)


@router.get("", response_model=list[Goal])
async def list_goals(store=Depends(get_goal_store)):
    """List goals in display order."""
    service = GoalService(store)
    return service.list_goals()


@router.get("/{goal_id}", response_model=Goal)
async def get_goal(goal_id: int, store=Depends(get_goal_store)):
    """
    Get a single goal by id.

    - Returns 404 if goal not found
    """
    service = GoalService(store)
    try:
        return service.get_goal(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{goal_id}", response_model=Goal)
async def update_goal(
    goal_id: int,
    goal_update: GoalUpdate,
    store=Depends(get_goal_store),
):
    """
    Update name, target or color of a goal.

    - Color changes refresh the label color
    - Returns 404 if goal not found
    """
    service = GoalService(store)
    try:
        return service.update_goal(goal_id, goal_update)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{goal_id}/fields/{field}", response_model=Goal)
async def set_goal_field(
    goal_id: int,
    field: str,
    value: Any = Body(..., embed=True),
    store=Depends(get_goal_store),
):
    """
    Overwrite a single field of a goal.

    - Returns 404 if goal not found
    - Returns 400 for fields that cannot be edited or invalid values
    """
    service = GoalService(store)
    try:
        return service.set_field(goal_id, field, value)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/{goal_id}/adjust", response_model=Goal)
async def adjust_goal(
    goal_id: int,
    adjustment: GoalAdjust,
    store=Depends(get_goal_store),
):
    """
    Add a relative amount to a goal's progress.

    - Progress is clamped at zero
    - Returns 404 if goal not found
    """
    service = GoalService(store)
    try:
        return service.adjust(goal_id, adjustment.delta)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{goal_id}/current", response_model=Goal)
async def set_goal_current(
    goal_id: int,
    entry: GoalCurrent,
    store=Depends(get_goal_store),
):
    """
    Record an absolute progress value.

    - Returns 404 if goal not found
    """
    service = GoalService(store)
    try:
        return service.set_current(goal_id, entry.current)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

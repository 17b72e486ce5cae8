"""Pacing router - API endpoints for month pacing views."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.exceptions import GoalNotFoundError
from app.models.pacing import CalendarView, DailyTarget, Dashboard, Period, Summary
from app.services import pacing_service
from app.services.goal_service import GoalService
from app.store import get_goal_store
from app.utils.workdays import count_working_days


router = APIRouter(prefix="/pacing", tags=["pacing"])


def get_today() -> date:
    """Dependency for the local calendar date."""
    return date.today()


def _period(reference_date: Optional[date], today: date) -> Period:
    return Period.for_month(reference_date or today)


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(
    reference_date: Optional[date] = Query(None, description="Any day of the month to view"),
    today: date = Depends(get_today),
    store=Depends(get_goal_store),
):
    """
    Summaries for every goal and the portfolio alert.

    - Period is the month of reference_date, defaulting to today
    """
    goals = GoalService(store).list_goals()
    return pacing_service.build_dashboard(goals, today, _period(reference_date, today))


@router.get("/summary/{goal_id}", response_model=Summary)
async def get_summary(
    goal_id: int,
    reference_date: Optional[date] = Query(None, description="Any day of the month to view"),
    today: date = Depends(get_today),
    store=Depends(get_goal_store),
):
    """
    Pacing summary for one goal.

    - Returns 404 if goal not found
    """
    try:
        goal = GoalService(store).get_goal(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return pacing_service.summarize(goal, today, _period(reference_date, today))


@router.get("/calendar", response_model=CalendarView)
async def get_calendar(
    reference_date: Optional[date] = Query(None, description="Any day of the month to view"),
    today: date = Depends(get_today),
    store=Depends(get_goal_store),
):
    """Every day of the month with its daily targets and comment."""
    goals = GoalService(store).list_goals()
    return pacing_service.calendar_view(goals, today, _period(reference_date, today))


@router.get("/days/{day}", response_model=Optional[list[DailyTarget]])
async def get_daily_targets(
    day: date,
    reference_date: Optional[date] = Query(None, description="Any day of the month to view"),
    today: date = Depends(get_today),
    store=Depends(get_goal_store),
):
    """
    Daily targets for one calendar day.

    - Returns null for days off, past days and days outside the period
    - Period defaults to the month of the requested day
    """
    goals = GoalService(store).list_goals()
    period = Period.for_month(reference_date or day)
    return pacing_service.daily_targets_for_date(day, goals, today, period)


@router.get("/alert")
async def get_alert(store=Depends(get_goal_store)):
    """Portfolio alert state."""
    goals = GoalService(store).list_goals()
    alert = pacing_service.portfolio_alert(goals)
    return {
        "alert": alert,
        "message": pacing_service.ALERT_MESSAGE if alert else None,
    }


@router.get("/workdays")
async def get_workdays(start: date, end: date):
    """
    Working-day count for an inclusive range.

    - Returns 400 if start is after end
    """
    return {
        "start": start,
        "end": end,
        "working_days": count_working_days(start, end),
    }

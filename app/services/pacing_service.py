"""Pacing service - month pacing calculations for goals.

Every function here is a pure computation over the goals, reference date and
period it is given. Goals are read, never mutated.
"""
import logging
from datetime import date
from typing import Optional, Sequence

from app.models.goal import Goal
from app.models.pacing import (
    CalendarDay,
    CalendarView,
    DailyTarget,
    Dashboard,
    PaceStatus,
    Period,
    Summary,
)
from app.utils.workdays import (
    as_date,
    count_working_days,
    days_between,
    enumerate_days,
    is_working_day,
    shift_month,
)

logger = logging.getLogger(__name__)

# Goals below this share of their target raise the portfolio alert
ALERT_THRESHOLD = 0.5

ALERT_MESSAGE = (
    "Some KPIs are below 50% of their target. Review your action plan."
)


def _required_pace(goal: Goal, working_days: int) -> Optional[float]:
    """Daily increment that closes the gap, None when no working days remain."""
    if working_days <= 0:
        return None
    return max(goal.target - goal.current, 0) / working_days


def remaining_working_days(today: date, period: Period) -> int:
    """
    Working days left in the period, counting today.

    Reference dates before the period count from its first day and dates
    after it leave nothing remaining.
    """
    today = as_date(today)
    if today > period.end:
        return 0
    return count_working_days(max(today, period.start), period.end)


def expected_progress(goal: Goal, today: date, period: Period) -> float:
    """Progress the goal would show advancing linearly across the period."""
    elapsed = days_between(period.start, today) + 1
    total = days_between(period.start, period.end) + 1
    ratio = min(max(elapsed / total, 0.0), 1.0)
    return goal.target * ratio


def summarize(goal: Goal, today: date, period: Period) -> Summary:
    """
    Compute the pacing summary for one goal.

    Args:
        goal: Goal to summarize
        today: Reference date
        period: Period the goal is paced against

    Returns:
        Summary with remaining working days, required daily pace,
        percent complete and the status against the linear expectation
    """
    remaining = remaining_working_days(today, period)
    pace = _required_pace(goal, remaining)

    percent = None
    if goal.target != 0:
        percent = 100 * goal.current / goal.target

    expected = expected_progress(goal, today, period)

    if goal.current >= expected:
        status = PaceStatus.ON_PACE
        deficit = None
        comment = "On pace! Progress is ahead of target."
    else:
        status = PaceStatus.BEHIND
        deficit = round(expected - goal.current, 1)
        comment = f"Behind target by {deficit:.1f} {goal.name}. Keep pushing!"

    logger.debug(
        "Summarized goal %s: remaining=%s pace=%s status=%s",
        goal.id, remaining, pace, status.value,
    )

    return Summary(
        goal_id=goal.id,
        name=goal.name,
        remaining_working_days=remaining,
        required_daily_pace=pace,
        percent_complete=percent,
        expected_progress=expected,
        status=status,
        deficit=deficit,
        comment=comment,
    )


def daily_targets_for_date(
    day: date,
    goals: Sequence[Goal],
    today: date,
    period: Period,
) -> Optional[list[DailyTarget]]:
    """
    Per-goal daily pace needed from a given calendar day to period end.

    Args:
        day: Calendar day to compute for
        goals: Goals in display order
        today: Reference date
        period: Period the goals are paced against

    Returns:
        One DailyTarget per goal in input order, or None when the day is
        a day off, lies before today, or falls outside the period
    """
    day = as_date(day)
    today = as_date(today)

    if not is_working_day(day) or day < today:
        return None
    if day < period.start or day > period.end:
        return None

    # day is a working day inside the period, so this is at least 1
    working_days = count_working_days(day, period.end)

    return [
        DailyTarget(
            goal_id=goal.id,
            name=goal.name,
            daily_pace=round(_required_pace(goal, working_days), 1),
            color=goal.color,
            label_color=goal.label_color,
        )
        for goal in goals
    ]


def calendar_comment(targets: Optional[Sequence[DailyTarget]]) -> Optional[str]:
    """
    Compose the reminder shown on a calendar day.

    Examples:
        "Still needed per day: Appointments 1.5, Deals 0.9."
    """
    if not targets:
        return None
    parts = ", ".join(f"{target.name} {target.daily_pace:.1f}" for target in targets)
    return f"Still needed per day: {parts}."


def calendar_view(goals: Sequence[Goal], today: date, period: Period) -> CalendarView:
    """Build the calendar of a period with per-day pacing and comments."""
    today = as_date(today)
    days = []

    for day in enumerate_days(period.start, period.end):
        targets = daily_targets_for_date(day, goals, today, period)
        days.append(
            CalendarDay(
                day=day,
                is_working_day=is_working_day(day),
                is_past=day < today,
                is_today=day == today,
                targets=targets,
                comment=calendar_comment(targets),
            )
        )

    return CalendarView(
        period=period,
        today=today,
        previous_month=shift_month(period.start, -1),
        next_month=shift_month(period.start, 1),
        days=days,
    )


def portfolio_alert(goals: Sequence[Goal]) -> bool:
    """
    Check whether any goal has fallen below half of its target.

    Goals with a zero target never trigger the alert.
    """
    return any(
        goal.target != 0 and goal.current / goal.target < ALERT_THRESHOLD
        for goal in goals
    )


def build_dashboard(goals: Sequence[Goal], today: date, period: Period) -> Dashboard:
    """Summaries for every goal together with the portfolio alert."""
    today = as_date(today)
    alert = portfolio_alert(goals)

    if alert:
        logger.warning("Portfolio alert raised for period %s - %s", period.start, period.end)

    return Dashboard(
        period=period,
        today=today,
        summaries=[summarize(goal, today, period) for goal in goals],
        alert=alert,
        alert_message=ALERT_MESSAGE if alert else None,
    )

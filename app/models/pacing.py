"""Pacing model definitions."""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from app.utils.workdays import as_date, month_bounds


class PaceStatus(str, Enum):
    """Progress compared with the linear expectation."""

    ON_PACE = "on_pace"
    BEHIND = "behind"


class Period(BaseModel):
    """Inclusive calendar window goals are paced against."""

    start: date
    end: date

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def drop_time_of_day(cls, value):
        """Keep only the calendar day of datetime input."""
        if isinstance(value, date):
            return as_date(value)
        return value

    @model_validator(mode="after")
    def check_order(self) -> "Period":
        """Reject periods that end before they start."""
        if self.start > self.end:
            raise ValueError(f"Period start {self.start} is after end {self.end}")
        return self

    @classmethod
    def for_month(cls, reference_date: date) -> "Period":
        """Period covering the calendar month of reference_date."""
        start, end = month_bounds(reference_date)
        return cls(start=start, end=end)


class Summary(BaseModel):
    """Pacing figures for one goal."""

    goal_id: int
    name: str
    remaining_working_days: int
    required_daily_pace: Optional[float] = None  # None when no working days remain
    percent_complete: Optional[float] = None  # None when target is 0
    expected_progress: float
    status: PaceStatus
    deficit: Optional[float] = None
    comment: str


class DailyTarget(BaseModel):
    """Per-day increment one goal needs on a given date."""

    goal_id: int
    name: str
    daily_pace: float
    color: str
    label_color: str


class CalendarDay(BaseModel):
    """One cell of the calendar view."""

    day: date
    is_working_day: bool
    is_past: bool
    is_today: bool
    targets: Optional[list[DailyTarget]] = None
    comment: Optional[str] = None


class CalendarView(BaseModel):
    """Every day of a period with its pacing."""

    period: Period
    today: date
    previous_month: date
    next_month: date
    days: list[CalendarDay]


class Dashboard(BaseModel):
    """Summaries for all goals plus the portfolio alert."""

    period: Period
    today: date
    summaries: list[Summary]
    alert: bool
    alert_message: Optional[str] = None

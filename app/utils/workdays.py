"""Calendar and working-day utilities."""
import calendar
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from dateutil.relativedelta import relativedelta

from app.config import settings
from app.exceptions import InvalidRangeError


def as_date(value: date) -> date:
    """
    Normalize a date or datetime to its calendar day.

    Args:
        value: Date or datetime

    Returns:
        Calendar date with any time-of-day dropped

    Examples:
        >>> as_date(datetime(2026, 10, 19, 17, 45))
        datetime.date(2026, 10, 19)
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def enumerate_days(start: date, end: date) -> list[date]:
    """
    List every calendar day from start to end, both inclusive.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Ascending list of dates

    Raises:
        InvalidRangeError: If start is after end
    """
    start = as_date(start)
    end = as_date(end)

    if start > end:
        raise InvalidRangeError(f"Range start {start} is after end {end}")

    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def is_working_day(day: date, non_working_weekdays: Optional[Iterable[int]] = None) -> bool:
    """
    Check whether a day is eligible for pacing.

    Args:
        day: Date to classify
        non_working_weekdays: Weekday numbers (Monday=0) treated as days off.
            Defaults to the configured weekend.

    Returns:
        True unless the day falls on a non-working weekday

    Examples:
        >>> is_working_day(date(2026, 10, 19))  # Monday
        True
        >>> is_working_day(date(2026, 10, 18))  # Sunday
        False
    """
    if non_working_weekdays is None:
        non_working_weekdays = settings.non_working_weekdays
    return as_date(day).weekday() not in set(non_working_weekdays)


def count_working_days(
    start: date,
    end: date,
    non_working_weekdays: Optional[Iterable[int]] = None,
) -> int:
    """
    Count working days between start and end, both inclusive.

    Returns 0 for a valid range that holds only days off.

    Raises:
        InvalidRangeError: If start is after end
    """
    return sum(
        1 for day in enumerate_days(start, end)
        if is_working_day(day, non_working_weekdays)
    )


def days_between(a: date, b: date) -> int:
    """Signed number of calendar days from a to b (b - a)."""
    return (as_date(b) - as_date(a)).days


def month_bounds(day: date) -> tuple[date, date]:
    """
    First and last calendar day of the month containing day.

    Examples:
        >>> month_bounds(date(2028, 2, 10))
        (datetime.date(2028, 2, 1), datetime.date(2028, 2, 29))
    """
    day = as_date(day)
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def shift_month(day: date, months: int) -> date:
    """
    First day of the month that lies the given number of months away.

    Args:
        day: Any day of the starting month
        months: Months to move, negative for earlier months

    Returns:
        First day of the target month

    Examples:
        >>> shift_month(date(2026, 1, 31), -1)
        datetime.date(2025, 12, 1)
    """
    return as_date(day).replace(day=1) + relativedelta(months=months)

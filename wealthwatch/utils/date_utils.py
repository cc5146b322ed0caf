"""Calendar-month window helpers"""

from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from wealthwatch.domain.exceptions import InvalidWindowError
from wealthwatch.domain.models import DateWindow


def month_window(months_back: int, offset_months: int = 0, today: Optional[date] = None) -> DateWindow:
    """
    Calendar-month aligned window covering the last `months_back` months,
    shifted `offset_months` months into the past.

    Example (today = 2024-06-15):
        month_window(1)    -> 2024-06-01 .. 2024-06-30
        month_window(3)    -> 2024-04-01 .. 2024-06-30
        month_window(3, 3) -> 2024-01-01 .. 2024-03-31
    """
    if months_back < 1:
        raise InvalidWindowError(f"months must be at least 1, got {months_back}")
    if offset_months < 0:
        raise InvalidWindowError(f"offset must not be negative, got {offset_months}")

    target = (today or date.today()) - relativedelta(months=offset_months)
    # day=31 clamps to the last day of the month
    end = target + relativedelta(day=31)
    start = (target - relativedelta(months=months_back - 1)).replace(day=1)
    return DateWindow(start=start, end=end)


def in_range(day: date, start: date, end: date) -> bool:
    """Inclusive date-only comparison"""
    if isinstance(day, datetime):
        day = day.date()
    return start <= day <= end


def month_label(day: date) -> str:
    """Short month label, e.g. 'Jan 2024'"""
    return day.strftime("%b %Y")

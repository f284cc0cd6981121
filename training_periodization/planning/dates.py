"""Pure calendar helpers used by the planners."""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Union


def add_weeks(start: date, weeks: int) -> date:
    return start + timedelta(weeks=weeks)


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the length of the target month.

    add_months(date(2024, 1, 31), 1) -> date(2024, 2, 29)
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


def weeks_between(start: date, end: date) -> int:
    """Number of training weeks needed to cover [start, end), partial weeks included."""
    return math.ceil((end - start).days / 7)


def parse_date(value: Union[str, date, datetime]) -> date:
    """Accept a date, datetime or ISO-8601 string and return a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a date or ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value.strip()).date()

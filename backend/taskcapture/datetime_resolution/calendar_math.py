"""Calendar arithmetic shared by the date resolver and the review layer."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

WEEKDAY_INDEX: dict[str, int] = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tue": 1,
    "tues": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

MONTH_INDEX: dict[str, int] = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sept": 9,
    "sep": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, pulling an overflowing day back to the month's last day."""

    return date(year, month, min(day, days_in_month(year, month)))


def add_months(base: date, months: int) -> date:
    """Add months to a date, clamping day to the target month's length."""

    total = (base.year * 12 + (base.month - 1)) + months
    return clamp_day(total // 12, total % 12 + 1, base.day)


def add_years(base: date, years: int) -> date:
    return clamp_day(base.year + years, base.month, base.day)


def days_until_weekday(current: date, target_weekday: int) -> int:
    """Days from ``current`` to the next occurrence of ``target_weekday``.

    A weekday named on that same day means the one a week out, never today.
    """

    delta = (target_weekday - current.weekday() + 7) % 7
    return delta or 7


def next_weekday(current: date, target_weekday: int) -> date:
    return current + timedelta(days=days_until_weekday(current, target_weekday))


def roll_past_to_next_year(value: date, today: date) -> date:
    """Assume a year-less date already behind us refers to next year."""

    if value < today:
        return add_years(value, 1)
    return value


def day_of_month(today: date, day: int) -> date | None:
    """Resolve "the Nth" to this month (clamped), or next month when already past."""

    if not 1 <= day <= 31:
        return None
    candidate = clamp_day(today.year, today.month, day)
    if candidate < today:
        following = add_months(date(today.year, today.month, 1), 1)
        candidate = clamp_day(following.year, following.month, day)
    return candidate


def start_of_week(value: date) -> date:
    return value - timedelta(days=value.weekday())


def end_of_week(value: date) -> date:
    return start_of_week(value) + timedelta(days=6)


def end_of_month(value: date) -> date:
    return date(value.year, value.month, days_in_month(value.year, value.month))


def end_of_year(value: date) -> date:
    return date(value.year, 12, 31)


def start_of_next(value: date, unit: str) -> date:
    if unit == "week":
        return start_of_week(value) + timedelta(days=7)
    if unit == "month":
        return add_months(date(value.year, value.month, 1), 1)
    return date(value.year + 1, 1, 1)


def week_range(value: date) -> tuple[datetime, datetime]:
    """Monday 00:00 through Sunday 23:59:59 of the week containing ``value``."""

    start = start_of_week(value)
    end = start + timedelta(days=6)
    return datetime.combine(start, time.min), datetime.combine(end, time(23, 59, 59))


def month_range(value: date) -> tuple[datetime, datetime]:
    start = date(value.year, value.month, 1)
    return datetime.combine(start, time.min), datetime.combine(end_of_month(value), time(23, 59, 59))


def business_days_between(start: date, end: date) -> int:
    """Count Monday-Friday days in the inclusive range."""

    if end < start:
        return 0
    full_weeks, remainder = divmod((end - start).days + 1, 7)
    count = full_weeks * 5
    for offset in range(remainder):
        if (start + timedelta(days=full_weeks * 7 + offset)).weekday() < 5:
            count += 1
    return count

"""Age calculations. The reference time is always passed in, never read from the clock."""

import calendar
from datetime import date, datetime


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def age_in_days(birth_date: date | datetime, now: date | datetime) -> int:
    """Whole days elapsed since birth. Clamped to 0 when now precedes birth."""
    return max(0, (_as_date(now) - _as_date(birth_date)).days)


def age_in_weeks(birth_date: date | datetime, now: date | datetime) -> int:
    """Whole weeks elapsed since birth."""
    return age_in_days(birth_date, now) // 7


def age_in_months(birth_date: date | datetime, now: date | datetime) -> int:
    """Calendar months elapsed since birth."""
    dob = _as_date(birth_date)
    ref = _as_date(now)
    months = (ref.year - dob.year) * 12 + (ref.month - dob.month)
    if ref.day < dob.day:
        months -= 1
    return max(0, months)


def age_description(birth_date: date | datetime, now: date | datetime) -> str:
    """Short human readable age, e.g. '3 weeks', '5 months', '1 year 2 months'."""
    months = age_in_months(birth_date, now)
    if months < 1:
        weeks = age_in_weeks(birth_date, now)
        return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"
    if months < 12:
        return f"{months} month" if months == 1 else f"{months} months"
    years, rest = divmod(months, 12)
    year_part = f"{years} year" if years == 1 else f"{years} years"
    if rest == 0:
        return year_part
    month_part = f"{rest} month" if rest == 1 else f"{rest} months"
    return f"{year_part} {month_part}"


def add_months(start: date, months: int) -> date:
    """Same day of month `months` later, clamped to the last day of a shorter month."""
    index = start.month - 1 + months
    year, month = start.year + index // 12, index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)

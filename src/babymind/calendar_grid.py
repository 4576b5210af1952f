"""Month grid for the family calendar."""

from datetime import date, timedelta

GRID_DAYS = 42  # six weeks


def month_grid(year: int, month: int) -> list[date]:
    """42 consecutive days starting on the Monday on or before the 1st of the month."""
    first = date(year, month, 1)
    start = first - timedelta(days=first.weekday())
    return [start + timedelta(days=i) for i in range(GRID_DAYS)]


def month_weeks(year: int, month: int) -> list[list[date]]:
    """The month grid split into six Monday-first weeks."""
    days = month_grid(year, month)
    return [days[i : i + 7] for i in range(0, GRID_DAYS, 7)]

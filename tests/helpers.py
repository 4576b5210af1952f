"""Builders shared by the test modules."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any

from babymind.models import Baby, Gender

# Wednesday. Monday of the same week is 2024-06-10, Sunday 2024-06-16.
TODAY = date(2024, 6, 12)
NOW = datetime.combine(TODAY, time(hour=10))


def make_baby(
    *,
    age_days: int = 200,
    today: date = TODAY,
    name: str = "Deniz",
    **overrides: Any,
) -> Baby:
    """Build a Baby born `age_days` before `today`."""
    return Baby(
        name=name,
        birth_date=today - timedelta(days=age_days),
        gender=overrides.pop("gender", Gender.FEMALE),
        birth_weight_kg=overrides.pop("birth_weight_kg", 3.2),
        birth_height_cm=overrides.pop("birth_height_cm", 50.0),
        **overrides,
    )


def at(day: date, hour: int = 10, minute: int = 0) -> datetime:
    """Naive local datetime on `day`."""
    return datetime.combine(day, time(hour=hour, minute=minute))

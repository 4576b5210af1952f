"""Upcoming / overdue selection shared by vaccinations, appointments and reminders."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _is_completed(item: Any) -> bool:
    return bool(item.is_completed)


def upcoming(
    items: Iterable[T],
    reference: Any,
    window_size: int,
    *,
    trigger: Callable[[T], Any],
    completed: Callable[[T], bool] = _is_completed,
) -> list[T]:
    """
    Not-completed items whose trigger is at or after the reference,
    soonest first, at most window_size of them.
    """
    selected = [i for i in items if not completed(i) and trigger(i) >= reference]
    selected.sort(key=trigger)
    return selected[: max(0, window_size)]


def overdue(
    items: Iterable[T],
    reference: Any,
    *,
    trigger: Callable[[T], Any],
    completed: Callable[[T], bool] = _is_completed,
) -> list[T]:
    """Not-completed items whose trigger has already passed, oldest first."""
    selected = [i for i in items if not completed(i) and trigger(i) < reference]
    selected.sort(key=trigger)
    return selected

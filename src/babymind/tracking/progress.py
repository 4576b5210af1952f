"""Progress aggregation - points, level, streak and achievements from the ledger."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from babymind.models import EntityKind, ProgressAggregate
from babymind.tracking.ledger import CompletionEvent, CompletionLedger

DEFAULT_LEVEL_THRESHOLD = 100


@dataclass(frozen=True)
class HistoryStats:
    """Inputs to achievement rules."""

    total_points: int
    completed_tasks: int
    streak_days: int
    longest_streak: int


# Evaluated in order; an achievement is held whenever its rule is true for the history.
ACHIEVEMENTS: list[tuple[str, Callable[[HistoryStats], bool]]] = [
    ("First Step", lambda s: s.completed_tasks >= 1),
    ("10 Tasks", lambda s: s.completed_tasks >= 10),
    ("100 Points", lambda s: s.total_points >= 100),
    ("7 Day Streak", lambda s: s.longest_streak >= 7),
    ("30 Day Streak", lambda s: s.longest_streak >= 30),
]


def level_for(total_points: int, threshold: int = DEFAULT_LEVEL_THRESHOLD) -> int:
    """Every `threshold` points is one level, starting at level 1."""
    return max(0, total_points) // threshold + 1


def current_streak(days: Iterable[date], today: date) -> int:
    """Consecutive completion days ending today, or yesterday if today has none yet."""
    active = {d for d in days if d <= today}
    if today in active:
        cursor = today
    elif today - timedelta(days=1) in active:
        cursor = today - timedelta(days=1)
    else:
        return 0
    streak = 0
    while cursor in active:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(days: Iterable[date]) -> int:
    ordered = sorted(set(days))
    best = run = 0
    previous: date | None = None
    for day in ordered:
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        best = max(best, run)
        previous = day
    return best


def unlocked_achievements(stats: HistoryStats) -> list[str]:
    return [label for label, rule in ACHIEVEMENTS if rule(stats)]


class ProgressAggregator:
    """Recomputes a baby's progress from scratch on every call. No cached state."""

    def __init__(
        self,
        ledger: CompletionLedger,
        level_threshold: int = DEFAULT_LEVEL_THRESHOLD,
    ) -> None:
        if level_threshold <= 0:
            raise ValueError("level_threshold must be positive")
        self._ledger = ledger
        self._level_threshold = level_threshold

    def recompute(self, baby_id: UUID, today: date) -> ProgressAggregate:
        events = [
            e
            for e in self._ledger.events(baby_id, EntityKind.TASK)
            if e.completed_at.date() <= today
        ]
        return self._aggregate(baby_id, events, today)

    def _aggregate(
        self,
        baby_id: UUID,
        events: list[CompletionEvent],
        today: date,
    ) -> ProgressAggregate:
        total_points = sum(e.points for e in events)
        # Retracted completions keep their points but no longer count as done.
        standing = [e for e in events if e.standing]
        days = [e.completed_at.date() for e in standing]
        stats = HistoryStats(
            total_points=total_points,
            completed_tasks=len({e.entity_id for e in standing}),
            streak_days=current_streak(days, today),
            longest_streak=longest_streak(days),
        )
        return ProgressAggregate(
            baby_id=baby_id,
            total_points=stats.total_points,
            level=level_for(stats.total_points, self._level_threshold),
            streak_days=stats.streak_days,
            completed_tasks=stats.completed_tasks,
            achievements=unlocked_achievements(stats),
        )

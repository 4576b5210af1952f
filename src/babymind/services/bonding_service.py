"""Bonding activity service - play suggestions and parent-baby activity log."""

import threading
from datetime import date, datetime, time, timedelta
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import (
    Baby,
    BondingActivity,
    BondingActivityType,
    Domain,
    PlaySuggestion,
)
from babymind.models.tags import BONDING_MIN_AGE_WEEKS
from babymind.rules import RuleEngine
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike


class BondingService:
    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
    ) -> None:
        self._baby = baby
        self._rules = rule_engine
        self._lock = lock if lock is not None else threading.RLock()
        self._store: CollectionStore[BondingActivity] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def play_suggestions(self, age_months: int) -> PlaySuggestion:
        return self._rules.resolve(Domain.PLAY, age_months)

    def suitable_activity_types(self, now: date | datetime) -> list[BondingActivityType]:
        """Activity types old enough to be suggested for the baby."""
        weeks = self._baby.age_in_weeks(now)
        return [t for t, min_weeks in BONDING_MIN_AGE_WEEKS.items() if weeks >= min_weeks]

    def tips(self, topic: str) -> list[str]:
        """Static tips: 'massage', 'reading' or 'music'."""
        return list(self._rules.reference_list("bonding_tips", topic))

    def add_activity(self, activity: BondingActivity) -> BondingActivity:
        with self._lock:
            return self._store.add(activity)

    def complete_activity(self, activity_id: UUID, now: datetime) -> BondingActivity | None:
        return self._tracker.complete(activity_id, now)

    def delete_activity(self, activity_id: UUID) -> bool:
        return self._tracker.delete(activity_id)

    def activities(self) -> list[BondingActivity]:
        """Most recent first."""
        return sorted(self._store, key=lambda a: a.scheduled_at, reverse=True)

    def weekly_summary(self, on: date) -> tuple[int, int]:
        """(completed, total) for the Monday-to-Sunday week containing `on`."""
        week_start = datetime.combine(on - timedelta(days=on.weekday()), time.min)
        week_end = week_start + timedelta(days=7)
        week = self._tracker.filter(
            self._baby.id,
            lambda a: week_start <= a.scheduled_at < week_end,
        )
        return sum(1 for a in week if a.is_completed), len(week)

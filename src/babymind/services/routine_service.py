"""Routine service."""

import logging
import threading
from datetime import datetime, timedelta
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, Domain, Routine, RoutineBundle, RoutineRecommendation
from babymind.rules import RuleEngine
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class RoutineService:
    """Scheduled routines and age-based routine recommendations."""

    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
        score_days: int = 7,
    ) -> None:
        self._baby = baby
        self._rules = rule_engine
        self._lock = lock if lock is not None else threading.RLock()
        self._score_days = score_days
        self._store: CollectionStore[Routine] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def recommended_routines(self, age_months: int) -> list[RoutineRecommendation]:
        bundle: RoutineBundle = self._rules.resolve(Domain.ROUTINE, age_months)
        return list(bundle.routines)

    def add_routine(self, routine: Routine) -> Routine:
        with self._lock:
            return self._store.add(routine)

    def complete_routine(self, routine_id: UUID, now: datetime) -> Routine | None:
        return self._tracker.complete(routine_id, now)

    def delete_routine(self, routine_id: UUID) -> bool:
        return self._tracker.delete(routine_id)

    def routines(self) -> list[Routine]:
        return sorted(self._store, key=lambda r: r.scheduled_at)

    def success_score(self, now: datetime, days: int | None = None) -> float:
        """Percent of routines scheduled in the last `days` days that were completed."""
        cutoff = now - timedelta(days=days or self._score_days)
        recent = self._tracker.filter(self._baby.id, lambda r: r.scheduled_at >= cutoff)
        if not recent:
            return 0.0
        completed = sum(1 for r in recent if r.is_completed)
        return completed / len(recent) * 100.0

"""Developmental milestone service."""

import logging
import threading
from datetime import datetime, time
from uuid import UUID

from babymind.age import add_months
from babymind.events import EventChannel
from babymind.models import Baby, Domain, Milestone, MilestoneBundle, MilestoneCategory
from babymind.rules import RuleEngine, upcoming
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class MilestoneService:
    """Default milestones per baby; completed means achieved."""

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
        self._store: CollectionStore[Milestone] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)
        self._initialize_default_milestones()

    def _initialize_default_milestones(self) -> None:
        with self._lock:
            self._seed_milestones()

    def _seed_milestones(self) -> None:
        for rule in self._rules.table(Domain.MILESTONE).rules:
            bundle = rule.payload
            if not isinstance(bundle, MilestoneBundle):
                continue
            for spec in bundle.milestones:
                self._store.add(
                    Milestone(
                        baby_id=self._baby.id,
                        category=spec.category,
                        title=spec.title,
                        min_months=spec.min_months,
                        max_months=spec.max_months,
                        scheduled_at=datetime.combine(
                            add_months(self._baby.birth_date, spec.min_months), time.min
                        ),
                    )
                )

    def period(self, age_months: int) -> MilestoneBundle:
        """Milestones to watch for in the baby's current period."""
        return self._rules.resolve(Domain.MILESTONE, age_months)

    def milestones(self, category: MilestoneCategory | None = None) -> list[Milestone]:
        found = self._tracker.filter(
            self._baby.id,
            lambda m: category is None or m.category == category,
        )
        return sorted(found, key=lambda m: (m.min_months, m.max_months))

    def expected_now(self, age_months: int) -> list[Milestone]:
        """Milestones whose expected window contains the age."""
        return [m for m in self.milestones() if m.min_months <= age_months < m.max_months]

    def delayed(self, age_months: int) -> list[Milestone]:
        """Not achieved although the expected window has closed."""
        return [
            m for m in self.milestones() if not m.is_completed and age_months >= m.max_months
        ]

    def upcoming(self, age_months: int, window_size: int = 3) -> list[Milestone]:
        return upcoming(self._store, age_months, window_size, trigger=lambda m: m.min_months)

    def mark_achieved(self, milestone_id: UUID, on: datetime) -> Milestone | None:
        with self._lock:
            before = self._store.get(milestone_id)
            milestone = self._tracker.complete(milestone_id, on)
        if before is not None and not before.is_completed:
            logger.info("Milestone achieved for baby %s: %s", self._baby.id, milestone.title)
        return milestone

    def toggle(self, milestone_id: UUID, now: datetime) -> Milestone | None:
        return self._tracker.toggle(milestone_id, now)

"""Task service - daily tasks, completion and gamified progress."""

import logging
import threading
from datetime import date, datetime
from uuid import UUID

from babymind.events import AchievementUnlocked, EventChannel
from babymind.models import Baby, ProgressAggregate, Task
from babymind.models.tags import PRIORITY_RANK
from babymind.rules import RuleEngine
from babymind.tracking import (
    CollectionStore,
    CompletionLedger,
    CompletionTracker,
    DailyTaskGenerator,
    LockLike,
    ProgressAggregator,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates task generation and completion for one baby."""

    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
        level_threshold: int = 100,
    ) -> None:
        self._baby = baby
        self._lock = lock if lock is not None else threading.RLock()
        self._events = events
        self._store: CollectionStore[Task] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(
            self._store,
            ledger,
            points_of=lambda t: t.points,
            events=events,
            lock=self._lock,
        )
        self._generator = DailyTaskGenerator(rule_engine)
        self._progress = ProgressAggregator(ledger, level_threshold)

    @property
    def tracker(self) -> CompletionTracker[Task]:
        return self._tracker

    def generate_daily_tasks(self, today: date) -> list[Task]:
        """Create today's tasks that do not exist yet. Returns the new ones."""
        with self._lock:
            new_tasks = self._generator.generate_daily_tasks(self._baby, self._store, today)
            for task in new_tasks:
                self._store.add(task)
            return new_tasks

    def add_task(self, task: Task) -> Task:
        with self._lock:
            return self._store.add(task)

    def complete_task(self, task_id: UUID, now: datetime) -> ProgressAggregate:
        """Complete a task and announce any achievement it unlocks."""
        return self._apply(task_id, now, toggle=False)

    def toggle_task(self, task_id: UUID, now: datetime) -> ProgressAggregate:
        return self._apply(task_id, now, toggle=True)

    def delete_task(self, task_id: UUID) -> bool:
        return self._tracker.delete(task_id)

    def _apply(self, task_id: UUID, now: datetime, *, toggle: bool) -> ProgressAggregate:
        with self._lock:
            today = now.date()
            before = self._progress.recompute(self._baby.id, today)
            if toggle:
                self._tracker.toggle(task_id, now)
            else:
                self._tracker.complete(task_id, now)
            after = self._progress.recompute(self._baby.id, today)
        if self._events is not None:
            for label in after.achievements:
                if label not in before.achievements:
                    logger.info("Achievement unlocked for baby %s: %s", self._baby.id, label)
                    self._events.publish(AchievementUnlocked(baby_id=self._baby.id, label=label))
        return after

    def progress(self, today: date) -> ProgressAggregate:
        with self._lock:
            return self._progress.recompute(self._baby.id, today)

    def get_task(self, task_id: UUID) -> Task | None:
        return self._store.get(task_id)

    def all_tasks(self) -> list[Task]:
        return sorted(self._store, key=lambda t: t.scheduled_at)

    def today_tasks(self, today: date) -> list[Task]:
        return self._tracker.filter(self._baby.id, lambda t: t.scheduled_at.date() == today)

    def pending_tasks(self) -> list[Task]:
        """Not completed, most urgent first."""
        pending = self._tracker.filter(self._baby.id, lambda t: not t.is_completed)
        return sorted(pending, key=lambda t: PRIORITY_RANK[t.priority], reverse=True)

    def completed_tasks(self) -> list[Task]:
        """Completed, most recent first."""
        done = self._tracker.filter(self._baby.id, lambda t: t.is_completed)
        return sorted(done, key=lambda t: t.completed_at or t.scheduled_at, reverse=True)

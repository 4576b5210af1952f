"""Reminder service - CRUD plus due-reminder alerts over the event channel."""

import logging
import threading
from datetime import datetime, timedelta
from uuid import UUID

from babymind.events import EventChannel, ReminderDue
from babymind.models import Baby, Reminder
from babymind.rules import upcoming
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)

DEFAULT_ALERT_WINDOW = timedelta(minutes=5)


class ReminderService:
    """
    Reminders for one baby. check_due() is driven by the caller's clock;
    each due reminder is announced once until it is acknowledged.
    """

    def __init__(
        self,
        baby: Baby,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
        alert_window: timedelta = DEFAULT_ALERT_WINDOW,
    ) -> None:
        self._baby = baby
        self._events = events
        self._lock = lock if lock is not None else threading.RLock()
        self._alert_window = alert_window
        self._store: CollectionStore[Reminder] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)
        self._shown: set[UUID] = set()

    def add_reminder(self, reminder: Reminder) -> Reminder:
        with self._lock:
            return self._store.add(reminder)

    def update_reminder(self, reminder: Reminder) -> bool:
        with self._lock:
            updated = self._store.update(reminder)
            if updated:
                self._shown.discard(reminder.id)
            return updated

    def delete_reminder(self, reminder_id: UUID) -> bool:
        with self._lock:
            self._shown.discard(reminder_id)
            return self._tracker.delete(reminder_id)

    def complete_reminder(self, reminder_id: UUID, now: datetime) -> Reminder | None:
        return self._tracker.complete(reminder_id, now)

    def get_reminder(self, reminder_id: UUID) -> Reminder | None:
        return self._store.get(reminder_id)

    def reminders(self) -> list[Reminder]:
        return sorted(self._store, key=lambda r: r.scheduled_at)

    def upcoming(self, now: datetime, window_size: int = 3) -> list[Reminder]:
        return upcoming(self._store, now, window_size, trigger=lambda r: r.scheduled_at)

    def check_due(self, now: datetime) -> list[Reminder]:
        """Announce reminders that fell due within the alert window and were not shown yet."""
        with self._lock:
            oldest = now - self._alert_window
            due = [
                r
                for r in self._store
                if not r.is_completed
                and oldest < r.scheduled_at <= now
                and r.id not in self._shown
            ]
            due.sort(key=lambda r: r.scheduled_at)
            for reminder in due:
                self._shown.add(reminder.id)
        for reminder in due:
            logger.info("Reminder due for baby %s: %s", self._baby.id, reminder.title)
            if self._events is not None:
                self._events.publish(
                    ReminderDue(
                        baby_id=self._baby.id,
                        reminder_id=reminder.id,
                        title=reminder.title,
                        due_at=reminder.scheduled_at,
                    )
                )
        return due

    def acknowledge(self, reminder_id: UUID) -> None:
        """Re-arm a shown reminder so a later check can announce it again."""
        with self._lock:
            self._shown.discard(reminder_id)

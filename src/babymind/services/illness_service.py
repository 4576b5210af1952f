"""Illness log."""

import logging
import threading
from datetime import date
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, Illness
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class IllnessService:
    """Illness episodes of one baby, newest first."""

    def __init__(
        self,
        baby: Baby,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
    ) -> None:
        self._baby = baby
        self._lock = lock if lock is not None else threading.RLock()
        self._store: CollectionStore[Illness] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def add_illness(self, illness: Illness) -> Illness:
        with self._lock:
            stored = self._store.add(illness)
        logger.info("Illness recorded for baby %s: %s", self._baby.id, illness.name)
        return stored

    def update_illness(self, illness: Illness) -> bool:
        with self._lock:
            return self._store.update(illness)

    def delete_illness(self, illness_id: UUID) -> bool:
        return self._tracker.delete(illness_id)

    def illnesses(self) -> list[Illness]:
        return sorted(self._store, key=lambda i: i.start_date, reverse=True)

    def active(self) -> list[Illness]:
        """Episodes without an end date."""
        return [i for i in self.illnesses() if i.is_active]

    def for_date_range(self, start: date, end: date, today: date | None = None) -> list[Illness]:
        """
        Episodes that started on or after `start` and were over by `end`.
        An ongoing episode counts as ending `today`; without `today` it is
        kept whenever it started inside the range.
        """
        return [
            i
            for i in self.illnesses()
            if i.start_date >= start and (i.end_date or today or end) <= end
        ]

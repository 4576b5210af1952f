"""Medicine history service."""

import threading
from datetime import date
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, MedicineHistory
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike


class MedicineHistoryService:
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
        self._store: CollectionStore[MedicineHistory] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def add_medicine(self, medicine: MedicineHistory) -> MedicineHistory:
        with self._lock:
            return self._store.add(medicine)

    def update_medicine(self, medicine: MedicineHistory) -> bool:
        with self._lock:
            return self._store.update(medicine)

    def delete_medicine(self, medicine_id: UUID) -> bool:
        return self._tracker.delete(medicine_id)

    def medicines(self) -> list[MedicineHistory]:
        """Newest course first."""
        return sorted(self._store, key=lambda m: m.start_date, reverse=True)

    def active(self, on: date) -> list[MedicineHistory]:
        return [m for m in self.medicines() if m.is_active(on)]

    def for_date_range(
        self,
        start: date,
        end: date,
        today: date | None = None,
    ) -> list[MedicineHistory]:
        """Courses that started on or after `start` and ended by `end` (open ones end `today`)."""
        return [
            m
            for m in self.medicines()
            if m.start_date >= start and (m.end_date or today or end) <= end
        ]

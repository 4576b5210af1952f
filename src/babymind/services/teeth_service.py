"""Teeth eruption tracking over the primary tooth chart."""

import logging
import threading
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, ToothInfo, ToothRecord
from babymind.rules import RuleEngine
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class TeethService:
    """Erupted teeth of one baby, positioned on the 20-tooth chart."""

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
        self._lock = lock if lock is not None else threading.RLock()
        chart = [ToothInfo.model_validate(raw) for raw in rule_engine.reference_list("baby_teeth")]
        self._chart = {info.number: info for info in chart}
        self._store: CollectionStore[ToothRecord] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def chart(self) -> list[ToothInfo]:
        return sorted(self._chart.values(), key=lambda t: t.number)

    def add_tooth(self, record: ToothRecord) -> ToothRecord:
        """Store an erupted tooth. The chart name is used when none is given."""
        info = self._chart.get(record.tooth_number)
        if info is None:
            raise ValueError(f"Tooth {record.tooth_number} is not on the tooth chart")
        if not record.tooth_name:
            record = record.model_copy(update={"tooth_name": info.name})
        with self._lock:
            stored = self._store.add(record)
        logger.info("Tooth %d recorded for baby %s", record.tooth_number, self._baby.id)
        return stored

    def delete_tooth(self, record_id: UUID) -> bool:
        return self._tracker.delete(record_id)

    def teeth(self) -> list[ToothRecord]:
        """Oldest eruption first."""
        return sorted(self._store, key=lambda t: (t.eruption_date, t.tooth_number))

    def get_tooth(self, number: int) -> ToothRecord | None:
        return next((t for t in self._store if t.tooth_number == number), None)

    def has_tooth(self, number: int) -> bool:
        return self.get_tooth(number) is not None

    def teeth_by_row(self, row: int) -> list[ToothRecord]:
        """Erupted teeth of one jaw (0 upper, 1 lower) in chart order."""
        found = [
            t
            for t in self._store
            if t.tooth_number in self._chart and self._chart[t.tooth_number].row == row
        ]
        return sorted(found, key=lambda t: self._chart[t.tooth_number].col)

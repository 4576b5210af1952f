"""Safety checklist service."""

import logging
import threading
from datetime import datetime
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, SafetyCategory, SafetyChecklistItem
from babymind.rules import RuleEngine
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class SafetyChecklistService:
    """Checklist items are toggled freely and never award points."""

    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        ledger: CompletionLedger,
        *,
        created_at: datetime,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
    ) -> None:
        self._baby = baby
        self._lock = lock if lock is not None else threading.RLock()
        self._store: CollectionStore[SafetyChecklistItem] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)
        with self._lock:
            self._initialize_default_checklist(rule_engine, created_at)

    def _initialize_default_checklist(self, rule_engine: RuleEngine, created_at: datetime) -> None:
        for category in SafetyCategory:
            for text in rule_engine.reference_list("safety_checklist", category.value):
                self._store.add(
                    SafetyChecklistItem(
                        baby_id=self._baby.id,
                        category=category,
                        item=text,
                        scheduled_at=created_at,
                    )
                )
        logger.info("Initialized %d safety checklist items", len(self._store))

    def items(self, category: SafetyCategory | None = None) -> list[SafetyChecklistItem]:
        return self._tracker.filter(
            self._baby.id,
            lambda i: category is None or i.category == category,
        )

    def add_item(self, item: SafetyChecklistItem) -> SafetyChecklistItem:
        with self._lock:
            return self._store.add(item)

    def toggle_item(self, item_id: UUID, now: datetime) -> SafetyChecklistItem | None:
        return self._tracker.toggle(item_id, now)

    def delete_item(self, item_id: UUID) -> bool:
        return self._tracker.delete(item_id)

    def progress_by_category(self) -> dict[SafetyCategory, tuple[int, int]]:
        """(checked, total) per category, every category present."""
        progress: dict[SafetyCategory, tuple[int, int]] = {}
        for category in SafetyCategory:
            items = self.items(category)
            progress[category] = (sum(1 for i in items if i.is_completed), len(items))
        return progress

    def overall_progress(self) -> float:
        items = self.items()
        if not items:
            return 0.0
        return sum(1 for i in items if i.is_completed) / len(items) * 100.0

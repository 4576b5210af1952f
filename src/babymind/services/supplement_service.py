"""Vitamin and supplement service."""

import threading
from datetime import date
from uuid import UUID

from babymind.models import (
    Baby,
    Domain,
    Supplement,
    SupplementAdvice,
    SupplementBundle,
    SupplementType,
)
from babymind.rules import RuleEngine
from babymind.tracking import CollectionStore, LockLike


class SupplementService:
    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        *,
        lock: LockLike | None = None,
    ) -> None:
        self._baby = baby
        self._rules = rule_engine
        self._lock = lock if lock is not None else threading.RLock()
        self._store: CollectionStore[Supplement] = CollectionStore(baby.id)

    def add_supplement(self, supplement: Supplement) -> Supplement:
        with self._lock:
            return self._store.add(supplement)

    def update_supplement(self, supplement: Supplement) -> bool:
        with self._lock:
            return self._store.update(supplement)

    def delete_supplement(self, supplement_id: UUID) -> bool:
        with self._lock:
            return self._store.remove(supplement_id) is not None

    def supplements(self) -> list[Supplement]:
        """Newest course first."""
        return sorted(self._store, key=lambda s: s.start_date, reverse=True)

    def active_supplements(self, on: date | None = None) -> list[Supplement]:
        """Active courses; with `on`, also those not yet ended on that day."""
        return [
            s
            for s in self._store
            if s.is_active and (on is None or s.end_date is None or s.end_date >= on)
        ]

    def deficiency_alerts(self, age_months: int, on: date | None = None) -> list[SupplementAdvice]:
        """Age-recommended supplements the baby is not currently taking."""
        bundle: SupplementBundle = self._rules.resolve(Domain.SUPPLEMENT, age_months)
        taking = {s.supplement_type for s in self.active_supplements(on)}
        return [a for a in bundle.advice if a.type not in taking]

    def food_sources(self, supplement_type: SupplementType) -> list[str]:
        return list(self._rules.reference_list("food_sources", supplement_type.value))

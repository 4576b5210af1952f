"""Vaccination service - per-baby dose schedule built from the vaccination rule table."""

import logging
import threading
from datetime import datetime, time
from uuid import UUID

from babymind.age import add_months
from babymind.events import EventChannel
from babymind.models import Baby, Domain, VaccinationBundle, VaccinationDose
from babymind.rules import RuleEngine, overdue, upcoming
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


def _by_age(dose: VaccinationDose) -> tuple[int, datetime]:
    return (dose.recommended_age_months, dose.scheduled_at)


class VaccinationService:
    """Tracks which scheduled doses a baby has received."""

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
        self._store: CollectionStore[VaccinationDose] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)
        with self._lock:
            self._initialize_schedule()

    def _initialize_schedule(self) -> None:
        for rule in self._rules.table(Domain.VACCINATION).rules:
            bundle = rule.payload
            if not isinstance(bundle, VaccinationBundle):
                continue
            due = datetime.combine(add_months(self._baby.birth_date, rule.min_months), time.min)
            for dose in bundle.doses:
                self._store.add(
                    VaccinationDose(
                        baby_id=self._baby.id,
                        name=dose,
                        recommended_age_months=rule.min_months,
                        recommended_age_label=bundle.recommended_age_label,
                        scheduled_at=due,
                    )
                )
        logger.info("Initialized %d vaccination doses for baby %s", len(self._store), self._baby.id)

    def schedule(self) -> list[VaccinationDose]:
        return sorted(self._store, key=_by_age)

    def current_bundle(self, age_months: int) -> VaccinationBundle:
        """Vaccination group for the age bucket the baby is in."""
        return self._rules.resolve(Domain.VACCINATION, age_months)

    def mark_completed(self, dose_id: UUID, on: datetime) -> VaccinationDose | None:
        with self._lock:
            before = self._store.get(dose_id)
            dose = self._tracker.complete(dose_id, on)
        if before is not None and not before.is_completed:
            logger.info("Vaccination completed for baby %s: %s", self._baby.id, dose.name)
        return dose

    def undo_completed(self, dose_id: UUID) -> VaccinationDose | None:
        return self._tracker.uncomplete(dose_id)

    def upcoming(self, age_months: int, window_size: int = 3) -> list[VaccinationDose]:
        """Next doses not yet given whose recommended age has not passed."""
        return upcoming(
            self._store,
            age_months,
            window_size,
            trigger=lambda d: d.recommended_age_months,
        )

    def overdue(self, age_months: int) -> list[VaccinationDose]:
        return overdue(self._store, age_months, trigger=lambda d: d.recommended_age_months)

    def completed(self) -> list[VaccinationDose]:
        return sorted(
            self._tracker.filter(self._baby.id, lambda d: d.is_completed),
            key=_by_age,
        )

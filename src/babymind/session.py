"""Baby sessions - wires one baby's stores and services. No process-wide singletons."""

import logging
import threading
from datetime import datetime, timedelta
from uuid import UUID

from babymind.config import Settings, get_settings
from babymind.errors import BabyNotFound
from babymind.events import EventChannel
from babymind.models import Baby
from babymind.rules import RuleEngine
from babymind.services import (
    AppointmentService,
    BondingService,
    IllnessService,
    MedicineHistoryService,
    MilestoneService,
    ReminderService,
    RoutineService,
    SafetyChecklistService,
    SupplementService,
    TaskService,
    TeethService,
    VaccinationService,
)
from babymind.tracking import CompletionLedger

logger = logging.getLogger(__name__)


class BabySession:
    """All per-baby state. Mutations share one lock so aggregates see a consistent snapshot."""

    def __init__(
        self,
        baby: Baby,
        rule_engine: RuleEngine,
        *,
        now: datetime,
        settings: Settings | None = None,
        events: EventChannel | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.baby = baby
        self.settings = settings
        self.lock = threading.RLock()
        self.events = events or EventChannel()
        self.ledger = CompletionLedger()

        shared = {"events": self.events, "lock": self.lock}
        self.tasks = TaskService(
            baby,
            rule_engine,
            self.ledger,
            level_threshold=settings.level_threshold,
            **shared,
        )
        self.vaccinations = VaccinationService(baby, rule_engine, self.ledger, **shared)
        self.routines = RoutineService(
            baby,
            rule_engine,
            self.ledger,
            score_days=settings.routine_score_days,
            **shared,
        )
        self.bonding = BondingService(baby, rule_engine, self.ledger, **shared)
        self.milestones = MilestoneService(baby, rule_engine, self.ledger, **shared)
        self.safety = SafetyChecklistService(
            baby, rule_engine, self.ledger, created_at=now, **shared
        )
        self.supplements = SupplementService(baby, rule_engine, lock=self.lock)
        self.teeth = TeethService(baby, rule_engine, self.ledger, **shared)
        self.illnesses = IllnessService(baby, self.ledger, **shared)
        self.medicines = MedicineHistoryService(baby, self.ledger, **shared)
        self.reminders = ReminderService(
            baby,
            self.ledger,
            alert_window=timedelta(seconds=settings.reminder_alert_window_seconds),
            **shared,
        )
        self.appointments = AppointmentService(
            baby,
            self.reminders,
            self.ledger,
            reminder_lead=timedelta(hours=settings.appointment_reminder_hours),
            **shared,
        )

    @property
    def baby_id(self) -> UUID:
        return self.baby.id


class SessionRegistry:
    """Holds the sessions of the babies currently in use."""

    def __init__(self, rule_engine: RuleEngine, settings: Settings | None = None) -> None:
        self._rules = rule_engine
        self._settings = settings or get_settings()
        self._sessions: dict[UUID, BabySession] = {}
        self._lock = threading.Lock()

    @property
    def rule_engine(self) -> RuleEngine:
        return self._rules

    def open(self, baby: Baby, now: datetime) -> BabySession:
        """Create a session, or return the existing one for this baby."""
        with self._lock:
            session = self._sessions.get(baby.id)
            if session is None:
                session = BabySession(baby, self._rules, now=now, settings=self._settings)
                self._sessions[baby.id] = session
                logger.info("Opened session for baby %s", baby.id)
            return session

    def get(self, baby_id: UUID) -> BabySession:
        try:
            return self._sessions[baby_id]
        except KeyError:
            raise BabyNotFound(baby_id) from None

    def close(self, baby_id: UUID) -> bool:
        with self._lock:
            return self._sessions.pop(baby_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)

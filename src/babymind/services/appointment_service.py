"""Doctor appointment service. Appointments own an optional linked reminder."""

import logging
import threading
from datetime import datetime, timedelta
from uuid import UUID

from babymind.events import EventChannel
from babymind.models import Baby, DoctorAppointment, Reminder, ReminderType
from babymind.rules import upcoming
from babymind.services.reminder_service import ReminderService
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

logger = logging.getLogger(__name__)


class AppointmentService:
    def __init__(
        self,
        baby: Baby,
        reminder_service: ReminderService,
        ledger: CompletionLedger,
        *,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
        reminder_lead: timedelta = timedelta(hours=24),
    ) -> None:
        self._baby = baby
        self._reminders = reminder_service
        self._lock = lock if lock is not None else threading.RLock()
        self._reminder_lead = reminder_lead
        self._store: CollectionStore[DoctorAppointment] = CollectionStore(baby.id)
        self._tracker = CompletionTracker(self._store, ledger, events=events, lock=self._lock)

    def add_appointment(
        self,
        appointment: DoctorAppointment,
        create_reminder: bool = True,
    ) -> DoctorAppointment:
        """Store the appointment, optionally with a reminder `reminder_lead` before it."""
        with self._lock:
            if create_reminder:
                reminder = Reminder(
                    baby_id=appointment.baby_id,
                    title=f"Doctor appointment: {appointment.doctor_name}",
                    description=f"{appointment.specialty} - {appointment.clinic_name}",
                    reminder_type=ReminderType.DOCTOR,
                    scheduled_at=appointment.scheduled_at - self._reminder_lead,
                )
                self._reminders.add_reminder(reminder)
                appointment = appointment.model_copy(update={"reminder_id": reminder.id})
            return self._store.add(appointment)

    def update_appointment(self, appointment: DoctorAppointment) -> bool:
        with self._lock:
            return self._store.update(appointment)

    def delete_appointment(self, appointment_id: UUID) -> bool:
        """Delete the appointment and its linked reminder."""
        with self._lock:
            appointment = self._store.get(appointment_id)
            if appointment is None:
                logger.debug("delete: unknown appointment %s", appointment_id)
                return False
            if appointment.reminder_id is not None:
                self._reminders.delete_reminder(appointment.reminder_id)
            return self._tracker.delete(appointment_id)

    def complete_appointment(self, appointment_id: UUID, now: datetime) -> DoctorAppointment | None:
        return self._tracker.complete(appointment_id, now)

    def appointments(self) -> list[DoctorAppointment]:
        return sorted(
            self._tracker.filter(self._baby.id),
            key=lambda a: a.scheduled_at,
        )

    def upcoming(self, now: datetime, limit: int = 5) -> list[DoctorAppointment]:
        return upcoming(self._store, now, limit, trigger=lambda a: a.scheduled_at)

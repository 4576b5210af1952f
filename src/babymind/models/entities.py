"""Per-baby records owned by the collection stores."""

from datetime import date, datetime, time
from typing import Any, ClassVar
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from babymind.models.tags import (
    BondingActivityType,
    EntityKind,
    IllnessSymptom,
    MilestoneCategory,
    Priority,
    ReminderType,
    RepeatInterval,
    RoutineType,
    SafetyCategory,
    SupplementType,
    TaskCategory,
)


class BabyRecord(BaseModel):
    """Anything stored in a per-baby collection."""

    id: UUID = Field(default_factory=uuid4)
    baby_id: UUID


class TrackedEntity(BabyRecord):
    """A record with a completion state."""

    kind: ClassVar[EntityKind]

    scheduled_at: datetime = Field(..., description="When the entity is due or was created")
    is_completed: bool = False
    completed_at: datetime | None = None


class Task(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.TASK

    title: str
    description: str = ""
    category: TaskCategory
    priority: Priority = Priority.MEDIUM
    points: int = Field(default=10, ge=0, description="Awarded on first completion")
    reminder_at: datetime | None = None


class Routine(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.ROUTINE

    routine_type: RoutineType
    notes: str | None = None


class VaccinationDose(TrackedEntity):
    """One dose of the vaccination schedule."""

    kind: ClassVar[EntityKind] = EntityKind.VACCINATION

    name: str
    recommended_age_months: int = Field(..., ge=0)
    recommended_age_label: str = ""


class SafetyChecklistItem(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.CHECKLIST

    category: SafetyCategory
    item: str
    notes: str | None = None


class Milestone(TrackedEntity):
    """Developmental milestone. Completed means achieved."""

    kind: ClassVar[EntityKind] = EntityKind.MILESTONE

    category: MilestoneCategory
    title: str
    min_months: int = Field(..., ge=0)
    max_months: int = Field(..., ge=0)
    notes: str | None = None


class Reminder(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.REMINDER

    title: str
    description: str = ""
    reminder_type: ReminderType = ReminderType.OTHER
    repeat: RepeatInterval | None = None


class DoctorAppointment(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.APPOINTMENT

    doctor_name: str = ""
    specialty: str = ""
    clinic_name: str = ""
    address: str = ""
    phone_number: str = ""
    notes: str = ""
    reminder_id: UUID | None = None


class BondingActivity(TrackedEntity):
    kind: ClassVar[EntityKind] = EntityKind.BONDING

    activity_type: BondingActivityType
    duration_minutes: float | None = Field(default=None, ge=0)
    notes: str | None = None


def _default_scheduled_at(data: Any, date_field: str) -> Any:
    """Fill scheduled_at with the start of the record's own date when not given."""
    if not isinstance(data, dict) or data.get("scheduled_at") is not None:
        return data
    day = data.get(date_field)
    if day is None:
        return data
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return {**data, "scheduled_at": datetime.combine(day, time.min)}


class ToothRecord(TrackedEntity):
    """An erupted primary tooth."""

    kind: ClassVar[EntityKind] = EntityKind.TOOTH

    tooth_number: int = Field(..., ge=1, le=20, description="Position on the 20-tooth chart")
    tooth_name: str = ""
    eruption_date: date
    symptoms: list[str] = Field(default_factory=list)
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _scheduled_on_eruption(cls, data: Any) -> Any:
        return _default_scheduled_at(data, "eruption_date")


class Illness(TrackedEntity):
    """Illness episode. Open while end_date is unset."""

    kind: ClassVar[EntityKind] = EntityKind.ILLNESS

    name: str
    start_date: date
    end_date: date | None = None
    symptoms: list[IllnessSymptom] = Field(default_factory=list)
    notes: str | None = None
    doctor_visited: bool = False
    doctor_name: str | None = None
    medications: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _scheduled_on_start(cls, data: Any) -> Any:
        return _default_scheduled_at(data, "start_date")

    @property
    def is_active(self) -> bool:
        return self.end_date is None

    @property
    def duration_days(self) -> int | None:
        if self.end_date is None:
            return None
        return (self.end_date - self.start_date).days


class MedicineHistory(TrackedEntity):
    """A course of medicine."""

    kind: ClassVar[EntityKind] = EntityKind.MEDICINE

    name: str
    dosage: str = Field(default="", description="e.g. 5 ml, 1 tablet")
    frequency: str = Field(default="", description="e.g. 3 times a day")
    start_date: date
    end_date: date | None = None
    reason: str | None = None
    doctor_name: str | None = None
    side_effects: list[str] = Field(default_factory=list)
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _scheduled_on_start(cls, data: Any) -> Any:
        return _default_scheduled_at(data, "start_date")

    def is_active(self, on: date) -> bool:
        """Still being taken on `on`: no end date, or ending after that day."""
        return self.end_date is None or self.end_date > on

    @property
    def duration_days(self) -> int | None:
        if self.end_date is None:
            return None
        return (self.end_date - self.start_date).days


class Supplement(BabyRecord):
    """Vitamin or supplement course. Not completion tracked."""

    supplement_type: SupplementType
    name: str = ""
    dosage: str = ""
    start_date: date
    end_date: date | None = None
    is_active: bool = True

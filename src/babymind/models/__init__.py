"""Data models."""

from babymind.models.baby import Baby, Gender
from babymind.models.content import (
    ContentBundle,
    MilestoneBundle,
    MilestoneSpec,
    PlaySuggestion,
    RoutineBundle,
    RoutineRecommendation,
    SupplementAdvice,
    SupplementBundle,
    TaskBundle,
    TaskTemplate,
    ToothInfo,
    VaccinationBundle,
)
from babymind.models.entities import (
    BabyRecord,
    BondingActivity,
    DoctorAppointment,
    Illness,
    MedicineHistory,
    Milestone,
    Reminder,
    Routine,
    SafetyChecklistItem,
    Supplement,
    Task,
    ToothRecord,
    TrackedEntity,
    VaccinationDose,
)
from babymind.models.progress import ProgressAggregate
from babymind.models.tags import (
    BondingActivityType,
    Domain,
    EntityKind,
    IllnessSymptom,
    MilestoneCategory,
    Priority,
    ReminderType,
    RepeatInterval,
    RoutineType,
    SafetyCategory,
    Severity,
    SupplementType,
    TaskCategory,
)

__all__ = [
    "Baby",
    "BabyRecord",
    "BondingActivity",
    "BondingActivityType",
    "ContentBundle",
    "DoctorAppointment",
    "Domain",
    "EntityKind",
    "Gender",
    "Illness",
    "IllnessSymptom",
    "MedicineHistory",
    "Milestone",
    "MilestoneBundle",
    "MilestoneCategory",
    "MilestoneSpec",
    "PlaySuggestion",
    "Priority",
    "ProgressAggregate",
    "Reminder",
    "ReminderType",
    "RepeatInterval",
    "Routine",
    "RoutineBundle",
    "RoutineRecommendation",
    "RoutineType",
    "SafetyCategory",
    "SafetyChecklistItem",
    "Severity",
    "Supplement",
    "SupplementAdvice",
    "SupplementBundle",
    "SupplementType",
    "Task",
    "TaskBundle",
    "TaskCategory",
    "TaskTemplate",
    "ToothInfo",
    "ToothRecord",
    "TrackedEntity",
    "VaccinationBundle",
    "VaccinationDose",
]

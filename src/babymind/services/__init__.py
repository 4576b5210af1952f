"""Business logic services, one per feature, scoped to a single baby."""

from babymind.services.appointment_service import AppointmentService
from babymind.services.bonding_service import BondingService
from babymind.services.illness_service import IllnessService
from babymind.services.medicine_history_service import MedicineHistoryService
from babymind.services.milestone_service import MilestoneService
from babymind.services.reminder_service import ReminderService
from babymind.services.routine_service import RoutineService
from babymind.services.safety_service import SafetyChecklistService
from babymind.services.supplement_service import SupplementService
from babymind.services.task_service import TaskService
from babymind.services.teeth_service import TeethService
from babymind.services.vaccination_service import VaccinationService

__all__ = [
    "AppointmentService",
    "BondingService",
    "IllnessService",
    "MedicineHistoryService",
    "MilestoneService",
    "ReminderService",
    "RoutineService",
    "SafetyChecklistService",
    "SupplementService",
    "TaskService",
    "TeethService",
    "VaccinationService",
]

"""Tagged variants and their static display metadata."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TagInfo:
    """Display metadata attached to a tag."""

    label: str
    icon: str


class Domain(str, Enum):
    """Rule table domains."""

    PLAY = "play"
    VACCINATION = "vaccination"
    ROUTINE = "routine"
    MILESTONE = "milestone"
    TASK = "task"
    SUPPLEMENT = "supplement"


class EntityKind(str, Enum):
    """Kinds of tracked entity recorded in the completion ledger."""

    TASK = "task"
    ROUTINE = "routine"
    VACCINATION = "vaccination"
    CHECKLIST = "checklist"
    MILESTONE = "milestone"
    REMINDER = "reminder"
    APPOINTMENT = "appointment"
    BONDING = "bonding"
    TOOTH = "tooth"
    ILLNESS = "illness"
    MEDICINE = "medicine"


class TaskCategory(str, Enum):
    DAILY = "daily"
    HEALTH = "health"
    DEVELOPMENT = "development"
    FEEDING = "feeding"
    SLEEP = "sleep"
    MILESTONE = "milestone"
    VACCINATION = "vaccination"
    CHECKUP = "checkup"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RoutineType(str, Enum):
    SLEEP = "sleep"
    FEEDING = "feeding"
    PLAY = "play"
    BATH = "bath"
    NAP = "nap"


class BondingActivityType(str, Enum):
    PLAY = "play"
    MASSAGE = "massage"
    READING = "reading"
    MUSIC = "music"
    SKIN_TO_SKIN = "skin_to_skin"
    BATH = "bath"
    FEEDING = "feeding"
    EYE_CONTACT = "eye_contact"
    TALKING = "talking"
    CUDDLING = "cuddling"


class SafetyCategory(str, Enum):
    HOME = "home"
    TOYS = "toys"
    SLEEP = "sleep"
    PRODUCTS = "products"


class MilestoneCategory(str, Enum):
    MOTOR = "motor"
    LANGUAGE = "language"
    SOCIAL = "social"
    COGNITIVE = "cognitive"


class IllnessSymptom(str, Enum):
    FEVER = "fever"
    COUGH = "cough"
    RUNNY_NOSE = "runny_nose"
    DIARRHEA = "diarrhea"
    VOMITING = "vomiting"
    RASH = "rash"
    IRRITABILITY = "irritability"
    LOSS_OF_APPETITE = "loss_of_appetite"
    SLEEP_PROBLEMS = "sleep_problems"
    OTHER = "other"


class ReminderType(str, Enum):
    FEEDING = "feeding"
    VACCINE = "vaccine"
    DOCTOR = "doctor"
    MEDICINE = "medicine"
    SLEEP = "sleep"
    ACTIVITY = "activity"
    OTHER = "other"


class RepeatInterval(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class SupplementType(str, Enum):
    VITAMIN_D = "vitamin_d"
    IRON = "iron"
    ZINC = "zinc"
    MULTIVITAMIN = "multivitamin"
    PROBIOTIC = "probiotic"
    OMEGA3 = "omega3"
    OTHER = "other"


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


PRIORITY_RANK: dict[Priority, int] = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.CRITICAL: 3,
}

TASK_CATEGORY_INFO: dict[TaskCategory, TagInfo] = {
    TaskCategory.DAILY: TagInfo("Daily tasks", "checkmark.circle.fill"),
    TaskCategory.HEALTH: TagInfo("Health tracking", "heart.text.square.fill"),
    TaskCategory.DEVELOPMENT: TagInfo("Development", "chart.line.uptrend.xyaxis"),
    TaskCategory.FEEDING: TagInfo("Feeding", "fork.knife"),
    TaskCategory.SLEEP: TagInfo("Sleep", "bed.double.fill"),
    TaskCategory.MILESTONE: TagInfo("Milestones", "star.fill"),
    TaskCategory.VACCINATION: TagInfo("Vaccination", "syringe"),
    TaskCategory.CHECKUP: TagInfo("Checkup", "stethoscope"),
}

ROUTINE_TYPE_INFO: dict[RoutineType, TagInfo] = {
    RoutineType.SLEEP: TagInfo("Sleep", "moon.stars.fill"),
    RoutineType.FEEDING: TagInfo("Feeding", "fork.knife"),
    RoutineType.PLAY: TagInfo("Play", "gamecontroller.fill"),
    RoutineType.BATH: TagInfo("Bath", "drop.fill"),
    RoutineType.NAP: TagInfo("Nap", "bed.double.fill"),
}

SAFETY_CATEGORY_INFO: dict[SafetyCategory, TagInfo] = {
    SafetyCategory.HOME: TagInfo("Home safety", "house.fill"),
    SafetyCategory.TOYS: TagInfo("Toy safety", "gamecontroller.fill"),
    SafetyCategory.SLEEP: TagInfo("Sleep environment", "bed.double.fill"),
    SafetyCategory.PRODUCTS: TagInfo("Baby care products", "cube.box.fill"),
}

REMINDER_TYPE_INFO: dict[ReminderType, TagInfo] = {
    ReminderType.FEEDING: TagInfo("Feeding", "fork.knife"),
    ReminderType.VACCINE: TagInfo("Vaccine", "syringe"),
    ReminderType.DOCTOR: TagInfo("Doctor appointment", "stethoscope"),
    ReminderType.MEDICINE: TagInfo("Medicine", "pills"),
    ReminderType.SLEEP: TagInfo("Sleep", "bed.double"),
    ReminderType.ACTIVITY: TagInfo("Activity", "figure.walk"),
    ReminderType.OTHER: TagInfo("Other", "bell"),
}

# Earliest age at which each bonding activity is suggested, in weeks.
BONDING_MIN_AGE_WEEKS: dict[BondingActivityType, int] = {
    BondingActivityType.SKIN_TO_SKIN: 0,
    BondingActivityType.EYE_CONTACT: 0,
    BondingActivityType.TALKING: 0,
    BondingActivityType.CUDDLING: 0,
    BondingActivityType.FEEDING: 0,
    BondingActivityType.MUSIC: 0,
    BondingActivityType.MASSAGE: 2,
    BondingActivityType.BATH: 2,
    BondingActivityType.READING: 13,
    BondingActivityType.PLAY: 13,
}

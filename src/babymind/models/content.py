"""Static content bundles attached to age-range rules. Reference data, never user owned."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from babymind.models.tags import (
    MilestoneCategory,
    Priority,
    RoutineType,
    Severity,
    SupplementType,
    TaskCategory,
)


class ContentBundle(BaseModel):
    """Base payload of an age-range rule."""

    model_config = ConfigDict(frozen=True)

    age_range_label: str = Field(default="", description="e.g. 0-3 months")


class PlaySuggestion(ContentBundle):
    activities: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)


class VaccinationBundle(ContentBundle):
    name: str
    recommended_age_label: str = ""
    doses: list[str] = Field(default_factory=list)


class RoutineRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: RoutineType
    description: str


class RoutineBundle(ContentBundle):
    routines: list[RoutineRecommendation] = Field(default_factory=list)


class MilestoneSpec(BaseModel):
    """Milestone template with its own expected age window."""

    model_config = ConfigDict(frozen=True)

    category: MilestoneCategory
    title: str
    min_months: int = Field(..., ge=0)
    max_months: int = Field(..., ge=0)


class MilestoneBundle(ContentBundle):
    milestones: list[MilestoneSpec] = Field(default_factory=list)


class TaskTemplate(BaseModel):
    """Blueprint for a generated daily task."""

    model_config = ConfigDict(frozen=True)

    category: TaskCategory
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    points: int = Field(default=10, ge=0)
    weekdays: list[int] = Field(
        default_factory=list,
        description="ISO weekdays (1=Mon .. 7=Sun) the task applies to; empty means every day",
    )
    reminder_hour: int | None = Field(default=None, ge=0, le=23)

    def applies_on(self, isoweekday: int) -> bool:
        return not self.weekdays or isoweekday in self.weekdays


class TaskBundle(ContentBundle):
    templates: list[TaskTemplate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_template_per_category(self) -> "TaskBundle":
        # Generated tasks are keyed by (baby, category, date).
        seen: set[tuple[TaskCategory, int]] = set()
        for template in self.templates:
            days = template.weekdays or range(1, 8)
            for day in days:
                key = (template.category, day)
                if key in seen:
                    raise ValueError(
                        f"duplicate task category {template.category.value} on weekday {day}"
                    )
                seen.add(key)
        return self


class SupplementAdvice(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SupplementType
    message: str
    severity: Severity = Severity.LOW


class SupplementBundle(ContentBundle):
    advice: list[SupplementAdvice] = Field(default_factory=list)


class ToothInfo(BaseModel):
    """Entry of the primary tooth chart."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=20)
    name: str
    row: int = Field(..., ge=0, le=1, description="0 upper jaw, 1 lower jaw")
    col: int = Field(..., ge=0)

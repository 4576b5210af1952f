"""Derived progress aggregate. Computed, never stored."""

from uuid import UUID

from pydantic import BaseModel, Field


class ProgressAggregate(BaseModel):
    """Gamified progress of one baby's task history."""

    baby_id: UUID
    total_points: int = 0
    level: int = 1
    streak_days: int = 0
    completed_tasks: int = 0
    achievements: list[str] = Field(default_factory=list)

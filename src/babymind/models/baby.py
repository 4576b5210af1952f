"""Baby data model."""

from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from babymind import age


class Gender(str, Enum):
    """Baby gender."""

    MALE = "male"
    FEMALE = "female"


class Baby(BaseModel):
    """Baby record. Read-only input to every age calculation."""

    id: UUID = Field(default_factory=uuid4, description="Unique baby identifier")
    name: str = Field(default="", description="Display name")
    birth_date: date = Field(..., description="Date of birth")
    gender: Gender = Field(default=Gender.MALE)
    birth_weight_kg: float | None = Field(default=None, description="Birth weight in kg")
    birth_height_cm: float | None = Field(default=None, description="Birth height in cm")
    current_weight_kg: float | None = Field(default=None, description="Current weight in kg")
    current_height_cm: float | None = Field(default=None, description="Current height in cm")

    def age_in_days(self, now: date | datetime) -> int:
        return age.age_in_days(self.birth_date, now)

    def age_in_weeks(self, now: date | datetime) -> int:
        return age.age_in_weeks(self.birth_date, now)

    def age_in_months(self, now: date | datetime) -> int:
        """Compute age in months."""
        return age.age_in_months(self.birth_date, now)

    def age_summary(self, now: date | datetime) -> dict[str, Any]:
        """Age figures for display."""
        return {
            "baby_id": str(self.id),
            "days": self.age_in_days(now),
            "weeks": self.age_in_weeks(now),
            "months": self.age_in_months(now),
            "description": age.age_description(self.birth_date, now),
        }

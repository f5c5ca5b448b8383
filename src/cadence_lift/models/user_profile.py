"""User profile data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .exercises import EquipmentType, Limitation


class Goal(str, Enum):
    """Primary training goal."""

    HYPERTROPHY = "hypertrophy"  # Muscle size
    STRENGTH = "strength"  # Max strength
    ENDURANCE = "endurance"  # Muscular endurance


# Accepted ranges for profile settings
TRAINING_DAYS_RANGE = (1, 7)
CYCLE_LENGTH_RANGE = (4, 12)
SESSION_DURATION_RANGE = (15, 120)
NAME_LENGTH_RANGE = (2, 50)


@dataclass
class UserProfile:
    """Training profile for one person."""

    name: str
    goal: Goal = Goal.HYPERTROPHY
    training_days_per_week: int = 3
    cycle_length_weeks: int = 6
    session_duration: int = 40  # Minutes per session
    available_equipment: list[EquipmentType] = field(
        default_factory=lambda: [EquipmentType.BODYWEIGHT]
    )
    limitations: list[Limitation] = field(default_factory=list)
    excluded_exercises: list[str] = field(default_factory=list)  # Exercise slugs
    age: int | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Check profile settings against the accepted ranges.

        Raises:
            ValueError: If a setting is out of range
        """
        checks = [
            ("name", len(self.name.strip()), NAME_LENGTH_RANGE),
            ("training_days_per_week", self.training_days_per_week, TRAINING_DAYS_RANGE),
            ("cycle_length_weeks", self.cycle_length_weeks, CYCLE_LENGTH_RANGE),
            ("session_duration", self.session_duration, SESSION_DURATION_RANGE),
        ]
        for name, value, (low, high) in checks:
            if not low <= value <= high:
                raise ValueError(f"{name} must be between {low} and {high}, got {value}")
        if self.age is not None and not 10 <= self.age <= 120:
            raise ValueError(f"age must be between 10 and 120, got {self.age}")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "goal": self.goal.value,
            "training_days_per_week": self.training_days_per_week,
            "cycle_length_weeks": self.cycle_length_weeks,
            "session_duration": self.session_duration,
            "available_equipment": [eq.value for eq in self.available_equipment],
            "limitations": [lim.value for lim in self.limitations],
            "excluded_exercises": list(self.excluded_exercises),
            "age": self.age,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            goal=Goal(data.get("goal", Goal.HYPERTROPHY.value)),
            training_days_per_week=data.get("training_days_per_week", 3),
            cycle_length_weeks=data.get("cycle_length_weeks", 6),
            session_duration=data.get("session_duration", 40),
            available_equipment=[
                EquipmentType(eq) for eq in data.get("available_equipment", [])
            ],
            limitations=[Limitation(lim) for lim in data.get("limitations", [])],
            excluded_exercises=list(data.get("excluded_exercises", [])),
            age=data.get("age"),
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"Profile: {self.name}"
        if self.id is not None:
            summary += f" (ID: {self.id})"
        summary += "\n"
        summary += f"Goal: {self.goal.value}\n"
        summary += (
            f"Training days: {self.training_days_per_week}/week, "
            f"{self.session_duration} min/session, "
            f"{self.cycle_length_weeks}-week cycle\n"
        )
        summary += f"Equipment: {', '.join(eq.value for eq in self.available_equipment)}\n"

        if self.limitations:
            summary += f"Limitations: {', '.join(lim.value for lim in self.limitations)}\n"

        if self.excluded_exercises:
            summary += f"Excluded: {', '.join(self.excluded_exercises)}\n"

        return summary

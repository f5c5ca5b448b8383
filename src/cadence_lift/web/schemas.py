"""Request bodies for the JSON API."""

from pydantic import BaseModel, Field

from ..models.exercises import EquipmentType, Limitation
from ..models.feedback import Difficulty, FeedbackRecord
from ..models.user_profile import Goal


class ProfileCreate(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    goal: Goal = Goal.HYPERTROPHY
    training_days_per_week: int = Field(default=3, ge=1, le=7)
    cycle_length_weeks: int = Field(default=6, ge=4, le=12)
    session_duration: int = Field(default=40, ge=15, le=120)
    available_equipment: list[EquipmentType] = Field(default_factory=list)
    limitations: list[Limitation] = Field(default_factory=list)
    excluded_exercises: list[str] = Field(default_factory=list)
    age: int | None = Field(default=None, ge=10, le=120)


class ProfileUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    name: str | None = Field(default=None, min_length=2, max_length=50)
    goal: Goal | None = None
    training_days_per_week: int | None = Field(default=None, ge=1, le=7)
    cycle_length_weeks: int | None = Field(default=None, ge=4, le=12)
    session_duration: int | None = Field(default=None, ge=15, le=120)
    available_equipment: list[EquipmentType] | None = None
    limitations: list[Limitation] | None = None
    excluded_exercises: list[str] | None = None
    age: int | None = Field(default=None, ge=10, le=120)


class GenerateRequest(BaseModel):
    profile_id: int | None = None  # Falls back to the Family profile
    duration_min: int | None = Field(default=None, ge=15, le=120)
    goal: Goal | None = None
    # Saved to the profile before generating
    available_equipment: list[EquipmentType] | None = None
    limitations: list[Limitation] | None = None


class FeedbackItem(BaseModel):
    exercise_slug: str = Field(min_length=1)
    avg_rpe: float = Field(ge=1, le=10)
    completed_sets: int = Field(ge=1, le=10)
    completed_reps: int = Field(ge=1, le=200)
    difficulty: Difficulty
    notes: str = Field(default="", max_length=400)

    def to_record(self) -> FeedbackRecord:
        return FeedbackRecord(
            exercise_slug=self.exercise_slug,
            avg_rpe=self.avg_rpe,
            completed_sets=self.completed_sets,
            completed_reps=self.completed_reps,
            difficulty=self.difficulty,
            notes=self.notes,
        )


class FeedbackRequest(BaseModel):
    feedback: list[FeedbackItem] = Field(min_length=1)

"""Post-workout feedback records."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import InvalidFeedback


class Difficulty(str, Enum):
    """Subjective difficulty reported for an exercise."""

    TOO_EASY = "too_easy"
    JUST_RIGHT = "just_right"
    TOO_HARD = "too_hard"


# Accepted ranges for feedback values
RPE_RANGE = (1.0, 10.0)
COMPLETED_SETS_RANGE = (1, 10)
COMPLETED_REPS_RANGE = (1, 200)
MAX_NOTES_LENGTH = 400

# Records at or above this RPE count as hard regardless of reported difficulty
HARD_RPE_THRESHOLD = 8.5


@dataclass
class FeedbackRecord:
    """Feedback for one exercise of a completed session. Append-only."""

    exercise_slug: str
    avg_rpe: float
    completed_sets: int
    completed_reps: int
    difficulty: Difficulty
    notes: str = ""
    session_id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
    id: int | None = None

    @property
    def is_hard(self) -> bool:
        """True if the record signals a hard effort."""
        return self.avg_rpe >= HARD_RPE_THRESHOLD or self.difficulty == Difficulty.TOO_HARD

    def validate(self) -> None:
        """Check values against the accepted ranges.

        Raises:
            InvalidFeedback: If any value is out of range
        """
        if not self.exercise_slug:
            raise InvalidFeedback("exercise_slug", "must not be empty")

        low, high = RPE_RANGE
        if isinstance(self.avg_rpe, bool) or not isinstance(self.avg_rpe, (int, float)):
            raise InvalidFeedback("avg_rpe", "must be a number")
        if not low <= self.avg_rpe <= high:
            raise InvalidFeedback("avg_rpe", f"must be between {low:g} and {high:g}")

        for name, value, (low, high) in (
            ("completed_sets", self.completed_sets, COMPLETED_SETS_RANGE),
            ("completed_reps", self.completed_reps, COMPLETED_REPS_RANGE),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFeedback(name, "must be an integer")
            if not low <= value <= high:
                raise InvalidFeedback(name, f"must be between {low} and {high}")

        if not isinstance(self.difficulty, Difficulty):
            try:
                self.difficulty = Difficulty(self.difficulty)
            except ValueError:
                raise InvalidFeedback(
                    "difficulty", f"unknown difficulty {self.difficulty!r}"
                ) from None

        if len(self.notes or "") > MAX_NOTES_LENGTH:
            raise InvalidFeedback("notes", f"must be at most {MAX_NOTES_LENGTH} characters")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exercise_slug": self.exercise_slug,
            "session_id": self.session_id,
            "avg_rpe": self.avg_rpe,
            "completed_sets": self.completed_sets,
            "completed_reps": self.completed_reps,
            "difficulty": self.difficulty.value,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "FeedbackRecord":
        """Create from dictionary."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)

        return cls(
            id=id,
            exercise_slug=data["exercise_slug"],
            session_id=data.get("session_id"),
            avg_rpe=data["avg_rpe"],
            completed_sets=data["completed_sets"],
            completed_reps=data["completed_reps"],
            difficulty=Difficulty(data["difficulty"]),
            notes=data.get("notes") or "",
            created_at=created_at or datetime.now(),
        )


def validate_feedback(records: list[FeedbackRecord]) -> None:
    """Validate a batch of records; nothing is stored if any record fails."""
    if not records:
        raise InvalidFeedback("feedback", "at least one record is required")
    for record in records:
        record.validate()

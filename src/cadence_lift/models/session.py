"""Workout session models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .exercises import MovementPattern
from .feedback import FeedbackRecord
from .user_profile import Goal


class Phase(str, Enum):
    """Periodization phase of a training block."""

    ACCUMULATION = "accumulation"  # Volume focus
    INTENSIFICATION = "intensification"  # Intensity focus
    DELOAD = "deload"  # Planned reduction


@dataclass
class SessionItem:
    """One prescribed exercise within a session."""

    exercise_slug: str
    exercise_name: str
    movement_pattern: MovementPattern
    sets: int
    reps_min: int
    reps_max: int
    rest_sec: int
    load_modifier: float = 1.0  # Multiplier on the usual working load
    id: int | None = None

    def get_reps_display(self) -> str:
        """Format the rep target, e.g. '6-12' or '8'."""
        if self.reps_min == self.reps_max:
            return str(self.reps_min)
        return f"{self.reps_min}-{self.reps_max}"

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exercise_slug": self.exercise_slug,
            "exercise_name": self.exercise_name,
            "movement_pattern": self.movement_pattern.value,
            "sets": self.sets,
            "reps_min": self.reps_min,
            "reps_max": self.reps_max,
            "rest_sec": self.rest_sec,
            "load_modifier": self.load_modifier,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "SessionItem":
        """Create from dictionary."""
        return cls(
            id=id,
            exercise_slug=data["exercise_slug"],
            exercise_name=data.get("exercise_name", data["exercise_slug"]),
            movement_pattern=MovementPattern(data["movement_pattern"]),
            sets=data["sets"],
            reps_min=data["reps_min"],
            reps_max=data["reps_max"],
            rest_sec=data["rest_sec"],
            load_modifier=data.get("load_modifier", 1.0),
        )


@dataclass
class WorkoutSession:
    """A generated workout session.

    Immutable once created, apart from feedback attached after the workout.
    """

    profile_id: int
    block_week: int
    phase: Phase
    fatigue_score: float
    deload: bool
    target_rpe: float
    items: list[SessionItem] = field(default_factory=list)
    goal: Goal = Goal.HYPERTROPHY
    duration_min: int = 40
    feedback: list[FeedbackRecord] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None

    @property
    def exercise_slugs(self) -> list[str]:
        """Slugs of the prescribed exercises, in session order."""
        return [item.exercise_slug for item in self.items]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and export."""
        return {
            "id": self.id,
            "profile_id": self.profile_id,
            "block_week": self.block_week,
            "phase": self.phase.value,
            "fatigue_score": self.fatigue_score,
            "deload": self.deload,
            "target_rpe": self.target_rpe,
            "goal": self.goal.value,
            "duration_min": self.duration_min,
            "items": [item.to_dict() for item in self.items],
            "feedback": [record.to_dict() for record in self.feedback],
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "WorkoutSession":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=id if id is not None else data.get("id"),
            profile_id=data["profile_id"],
            block_week=data["block_week"],
            phase=Phase(data["phase"]),
            fatigue_score=data["fatigue_score"],
            deload=bool(data["deload"]),
            target_rpe=data["target_rpe"],
            goal=Goal(data.get("goal", Goal.HYPERTROPHY.value)),
            duration_min=data.get("duration_min", 40),
            items=[SessionItem.from_dict(item) for item in data.get("items", [])],
            feedback=[FeedbackRecord.from_dict(fb) for fb in data.get("feedback", [])],
            created_at=created_at,
        )

    def get_summary(self) -> str:
        """Generate a human-readable session summary."""
        header = f"Session {self.id}" if self.id is not None else "Session"
        lines = [
            f"{header}: week {self.block_week}, {self.phase.value} phase",
            f"Goal: {self.goal.value}, {self.duration_min} min",
            f"Target RPE: {self.target_rpe:g}  Fatigue score: {self.fatigue_score:.2f}"
            + ("  [DELOAD]" if self.deload else ""),
            "",
        ]
        for i, item in enumerate(self.items, 1):
            load = f"  load x{item.load_modifier:g}" if item.load_modifier != 1.0 else ""
            lines.append(
                f"  {i}. {item.exercise_name}: {item.sets} x {item.get_reps_display()}"
                f"  rest {item.rest_sec}s{load}"
            )

        if self.feedback:
            lines.append("")
            lines.append(f"Feedback: {len(self.feedback)} record(s)")
            for record in self.feedback:
                lines.append(
                    f"  - {record.exercise_slug}: RPE {record.avg_rpe:g}, "
                    f"{record.difficulty.value}"
                )

        return "\n".join(lines)

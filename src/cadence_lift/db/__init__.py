"""Database layer for cadence-lift."""

from .engine import get_db_path, init_db, seed_exercises
from .repositories import (
    ExerciseRepository,
    FeedbackRepository,
    SessionRepository,
    UserProfileRepository,
)

__all__ = [
    "ExerciseRepository",
    "FeedbackRepository",
    "get_db_path",
    "init_db",
    "seed_exercises",
    "SessionRepository",
    "UserProfileRepository",
]

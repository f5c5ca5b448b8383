"""Data models for cadence-lift."""

from .exercises import COMMON_EXERCISES, EquipmentType, Exercise, Limitation, MovementPattern
from .feedback import Difficulty, FeedbackRecord
from .session import Phase, SessionItem, WorkoutSession
from .user_profile import Goal, UserProfile

__all__ = [
    "COMMON_EXERCISES",
    "Difficulty",
    "EquipmentType",
    "Exercise",
    "FeedbackRecord",
    "Goal",
    "Limitation",
    "MovementPattern",
    "Phase",
    "SessionItem",
    "UserProfile",
    "WorkoutSession",
]

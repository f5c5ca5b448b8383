"""Adaptive workout generation engine."""

from .eligibility import filter_eligible, filter_for_profile
from .fatigue import FeedbackSummary, Readiness, assess_readiness
from .generator import WorkoutGenerator
from .periodization import PeriodState, period_state
from .prescription import Prescription, build_prescription
from .selection import ExerciseSelector, target_exercise_count

__all__ = [
    "ExerciseSelector",
    "FeedbackSummary",
    "PeriodState",
    "Prescription",
    "Readiness",
    "WorkoutGenerator",
    "assess_readiness",
    "build_prescription",
    "filter_eligible",
    "filter_for_profile",
    "period_state",
    "target_exercise_count",
]

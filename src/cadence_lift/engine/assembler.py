"""Combine selected exercises and the prescription into a session."""

from ..models.exercises import Exercise
from ..models.session import Phase, SessionItem, WorkoutSession
from ..models.user_profile import Goal
from .fatigue import Readiness
from .periodization import PeriodState
from .prescription import MIN_SETS, Prescription


def build_item(
    exercise: Exercise,
    prescription: Prescription,
    readiness_deload: bool,
    load_modifier: float,
) -> SessionItem:
    """Prescribe one exercise, clamping reps to its own bounds."""
    reps_min = max(prescription.reps_min, exercise.min_reps)
    reps_max = max(reps_min, min(prescription.reps_max, exercise.max_reps))
    sets = max(MIN_SETS, prescription.sets - 1) if readiness_deload else prescription.sets

    return SessionItem(
        exercise_slug=exercise.slug,
        exercise_name=exercise.name,
        movement_pattern=exercise.movement_pattern,
        sets=sets,
        reps_min=reps_min,
        reps_max=reps_max,
        rest_sec=prescription.rest_sec,
        load_modifier=load_modifier,
    )


def assemble_session(
    profile_id: int,
    exercises: list[Exercise],
    prescription: Prescription,
    readiness: Readiness,
    period: PeriodState,
    load_modifier: float,
    goal: Goal = Goal.HYPERTROPHY,
    duration_min: int = 40,
) -> WorkoutSession:
    """Assemble the finished, not yet persisted, session record.

    Sets drop by one only for a readiness-triggered deload; the phase
    deload is already reflected in the prescription.
    """
    items = [
        build_item(exercise, prescription, readiness.deload, load_modifier)
        for exercise in exercises
    ]

    return WorkoutSession(
        profile_id=profile_id,
        block_week=period.week,
        phase=period.phase,
        fatigue_score=readiness.fatigue_score,
        deload=readiness.deload or period.phase == Phase.DELOAD,
        target_rpe=prescription.target_rpe,
        items=items,
        goal=goal,
        duration_min=duration_min,
    )

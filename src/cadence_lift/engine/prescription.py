"""Set, rep, intensity and rest prescription."""

import math
from dataclasses import dataclass, replace

from ..models.feedback import Difficulty
from ..models.session import Phase
from ..models.user_profile import Goal

DELOAD_TARGET_RPE = 6.0
MAX_TARGET_RPE = 9.0
MIN_SETS = 2

_REP_RANGES = {
    Goal.STRENGTH: (4, 8, 4),
    Goal.ENDURANCE: (12, 20, 3),
    Goal.HYPERTROPHY: (6, 12, 3),
}

_TARGET_RPE = {
    Goal.STRENGTH: 8.2,
    Goal.ENDURANCE: 7.2,
    Goal.HYPERTROPHY: 8.0,
}


@dataclass(frozen=True)
class Prescription:
    """Session-wide training parameters before per-exercise clamping."""

    sets: int
    reps_min: int
    reps_max: int
    target_rpe: float
    rest_sec: int


def rep_range_by_goal(goal: Goal) -> tuple[int, int, int]:
    """Base (reps_min, reps_max, sets) for a goal."""
    return _REP_RANGES.get(goal, _REP_RANGES[Goal.HYPERTROPHY])


def base_rest_sec(goal: Goal) -> int:
    """Base rest between sets in seconds."""
    return 120 if goal == Goal.STRENGTH else 75


def target_rpe_by_goal(goal: Goal, deload: bool) -> float:
    """Target RPE for a goal; any deload forces the deload target."""
    if deload:
        return DELOAD_TARGET_RPE
    return _TARGET_RPE.get(goal, _TARGET_RPE[Goal.HYPERTROPHY])


def next_load_modifier(last_difficulty: Difficulty | None, deload: bool) -> float:
    """Load multiplier for the next session."""
    if deload:
        return 0.6
    if last_difficulty == Difficulty.TOO_EASY:
        return 1.05
    if last_difficulty == Difficulty.TOO_HARD:
        return 0.9
    return 1.0


def adjust_by_phase(phase: Phase, base: Prescription) -> Prescription:
    """Apply the phase's volume and intensity adjustments."""
    if phase == Phase.DELOAD:
        return Prescription(
            sets=max(MIN_SETS, base.sets - 1),
            reps_min=max(4, math.floor(base.reps_min * 0.9)),
            reps_max=max(6, math.floor(base.reps_max * 0.9)),
            target_rpe=round(max(DELOAD_TARGET_RPE, base.target_rpe - 1.2), 2),
            rest_sec=math.floor(base.rest_sec * 0.9),
        )

    if phase == Phase.INTENSIFICATION:
        return replace(
            base,
            reps_min=max(3, base.reps_min - 1),
            reps_max=max(base.reps_min + 1, base.reps_max - 2),
            target_rpe=round(min(MAX_TARGET_RPE, base.target_rpe + 0.3), 2),
            rest_sec=math.floor(base.rest_sec * 1.2),
        )

    return base


def build_prescription(goal: Goal, phase: Phase, deload: bool) -> Prescription:
    """Goal base adjusted for the phase.

    Args:
        goal: Profile goal
        phase: Current periodization phase
        deload: True if readiness or the phase calls for a deload

    Returns:
        Phase-adjusted prescription
    """
    reps_min, reps_max, sets = rep_range_by_goal(goal)
    base = Prescription(
        sets=sets,
        reps_min=reps_min,
        reps_max=reps_max,
        target_rpe=target_rpe_by_goal(goal, deload),
        rest_sec=base_rest_sec(goal),
    )
    return adjust_by_phase(phase, base)

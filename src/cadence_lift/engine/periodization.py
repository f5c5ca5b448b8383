"""Training-block position derived from session count.

Phase progression follows training cadence: a block week advances after
`training_days_per_week` sessions, whatever the dates were.
"""

from dataclasses import dataclass

from ..models.session import Phase

MIN_CYCLE_WEEKS = 4
MAX_CYCLE_WEEKS = 12

# Fraction of the cycle spent in accumulation
ACCUMULATION_SHARE = 0.6


@dataclass(frozen=True)
class PeriodState:
    """Current week and phase within the training cycle."""

    week: int
    phase: Phase
    cycle_length_weeks: int

    def get_position_display(self) -> str:
        """Get a human-readable position string."""
        return f"Week {self.week}/{self.cycle_length_weeks} ({self.phase.value})"


def clamp_cycle_length(cycle_length_weeks: int) -> int:
    """Clamp a cycle length into the supported range."""
    return max(MIN_CYCLE_WEEKS, min(MAX_CYCLE_WEEKS, cycle_length_weeks))


def phase_for_week(week: int, cycle_length_weeks: int) -> Phase:
    """Map a 1-based block week to its phase.

    The last week of the cycle is always a deload.
    """
    if week >= cycle_length_weeks:
        return Phase.DELOAD

    if week / cycle_length_weeks <= ACCUMULATION_SHARE:
        return Phase.ACCUMULATION
    return Phase.INTENSIFICATION


def period_state(
    session_count: int, training_days_per_week: int, cycle_length_weeks: int
) -> PeriodState:
    """Derive the block week and phase for the next session.

    Args:
        session_count: Sessions generated so far for the profile
        training_days_per_week: Planned sessions per week
        cycle_length_weeks: Cycle length, clamped to 4-12

    Returns:
        PeriodState for the session about to be generated
    """
    sessions_per_week = max(1, training_days_per_week)
    cycle_length = clamp_cycle_length(cycle_length_weeks)
    week_in_cycle = (session_count // sessions_per_week) % cycle_length
    week = week_in_cycle + 1
    return PeriodState(
        week=week,
        phase=phase_for_week(week, cycle_length),
        cycle_length_weeks=cycle_length,
    )

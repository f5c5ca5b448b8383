"""Exercise selection for a session.

Sampling is the only source of randomness in the engine. It draws from an
injected `random.Random`, so a fixed seed reproduces a selection exactly.
"""

import random

from ..models.exercises import Exercise, MovementPattern
from ..models.feedback import Difficulty
from .progression import apply_progression_paths, unique_by_slug

# Skeleton quota per movement pattern, in priority order
MOVEMENT_QUOTAS: list[tuple[MovementPattern, int]] = [
    (MovementPattern.LEGS, 2),
    (MovementPattern.PUSH, 1),
    (MovementPattern.PULL, 1),
    (MovementPattern.CORE, 1),
    (MovementPattern.CONDITIONING, 1),
]

# (max duration in minutes, exercise count); longer sessions get 7
_DURATION_STEPS = [(25, 4), (40, 5), (55, 6)]
MAX_EXERCISE_COUNT = 7


def target_exercise_count(duration_min: int) -> int:
    """Number of exercises that fit the requested session duration."""
    for max_duration, count in _DURATION_STEPS:
        if duration_min <= max_duration:
            return count
    return MAX_EXERCISE_COUNT


class ExerciseSelector:
    """Builds the exercise list of a session from an eligible pool."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def sample_by_movement(
        self, exercises: list[Exercise], movement: MovementPattern, count: int
    ) -> list[Exercise]:
        """Sample up to `count` exercises of one movement pattern."""
        matches = [ex for ex in exercises if ex.movement_pattern == movement]
        return self.rng.sample(matches, min(count, len(matches)))

    def build_skeleton(self, eligible: list[Exercise], count: int) -> list[Exercise]:
        """Fill the movement quotas, then cut to `count` exercises."""
        sampled = []
        for movement, quota in MOVEMENT_QUOTAS:
            sampled.extend(self.sample_by_movement(eligible, movement, quota))
        return unique_by_slug(sampled)[:count]

    def fill_shortfall(
        self, selection: list[Exercise], eligible: list[Exercise], count: int
    ) -> list[Exercise]:
        """Top up `selection` from unused eligible exercises."""
        if len(selection) >= count:
            return selection[:count]

        chosen = {ex.slug for ex in selection}
        remaining = [ex for ex in eligible if ex.slug not in chosen]
        shortfall = min(count - len(selection), len(remaining))
        fallback = self.rng.sample(remaining, shortfall)
        return unique_by_slug(selection + fallback)[:count]

    def select(
        self,
        eligible: list[Exercise],
        duration_min: int,
        latest_by_path: dict[str, Difficulty] | None = None,
    ) -> list[Exercise]:
        """Select the session's exercises.

        Args:
            eligible: Exercises that passed the eligibility filter
            duration_min: Requested session duration in minutes
            latest_by_path: Most recent difficulty per progression path

        Returns:
            Exactly `target_exercise_count(duration_min)` exercises, or the
            whole pool if it is smaller
        """
        count = target_exercise_count(duration_min)
        skeleton = self.build_skeleton(eligible, count)
        progressed = apply_progression_paths(skeleton, eligible, latest_by_path or {})
        return self.fill_shortfall(progressed, eligible, count)

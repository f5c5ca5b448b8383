"""Reduce the exercise catalog to what a profile can safely perform."""

from collections.abc import Iterable

from ..errors import NoEligibleExercises
from ..models.exercises import EquipmentType, Exercise, Limitation
from ..models.user_profile import UserProfile


def is_exercise_available(exercise: Exercise, available: set[EquipmentType]) -> bool:
    """Check whether the profile owns equipment for the exercise.

    An exercise without required equipment is always available. Otherwise
    any one owned tag is enough, and a bodyweight option always counts.
    """
    if not exercise.equipment:
        return True

    return any(
        eq in available or eq == EquipmentType.BODYWEIGHT for eq in exercise.equipment
    )


def is_exercise_safe(exercise: Exercise, limitations: set[Limitation]) -> bool:
    """Check that none of the exercise's contraindications apply."""
    if not limitations or not exercise.contraindications:
        return True

    return not any(item in limitations for item in exercise.contraindications)


def filter_eligible(
    exercises: list[Exercise],
    equipment: Iterable[EquipmentType],
    limitations: Iterable[Limitation] = (),
    excluded: Iterable[str] = (),
    profile_id: int | None = None,
) -> list[Exercise]:
    """Filter the catalog by equipment, limitations and manual exclusions.

    Args:
        exercises: Full exercise catalog
        equipment: Owned equipment (bodyweight is added implicitly)
        limitations: Physical limitations of the profile
        excluded: Slugs the profile excluded manually
        profile_id: Used only for the error raised on an empty result

    Returns:
        Eligible exercises in catalog order

    Raises:
        NoEligibleExercises: If no exercise passes the filter
    """
    available = set(equipment)
    available.add(EquipmentType.BODYWEIGHT)
    limitation_set = set(limitations)
    excluded_slugs = set(excluded)

    eligible = [
        ex
        for ex in exercises
        if is_exercise_available(ex, available)
        and is_exercise_safe(ex, limitation_set)
        and ex.slug not in excluded_slugs
    ]

    if not eligible:
        raise NoEligibleExercises(profile_id)

    return eligible


def filter_for_profile(exercises: list[Exercise], profile: UserProfile) -> list[Exercise]:
    """Apply `filter_eligible` with the profile's own settings."""
    return filter_eligible(
        exercises,
        equipment=profile.available_equipment,
        limitations=profile.limitations,
        excluded=profile.excluded_exercises,
        profile_id=profile.id,
    )

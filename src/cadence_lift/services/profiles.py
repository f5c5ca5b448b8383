"""Profile bootstrapping helpers.

Generation requires an existing profile; the CLI and web layers call
`ensure_default_profile` before generating when no profile was chosen.
"""

import logging

from ..errors import ProfileNotFound
from ..models.exercises import EquipmentType, Limitation
from ..models.user_profile import Goal, UserProfile

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_NAME = "Family"


def normalize_equipment(equipment: list[EquipmentType]) -> list[EquipmentType]:
    """Drop duplicates; an empty selection means bodyweight only."""
    normalized = list(dict.fromkeys(equipment))
    return normalized or [EquipmentType.BODYWEIGHT]


def default_profile(goal: Goal | None = None) -> UserProfile:
    """The fallback profile used when no profile was set up."""
    return UserProfile(
        name=DEFAULT_PROFILE_NAME,
        goal=goal or Goal.HYPERTROPHY,
        training_days_per_week=3,
        cycle_length_weeks=6,
        session_duration=40,
        available_equipment=[EquipmentType.BODYWEIGHT],
    )


async def ensure_default_profile(repo, goal: Goal | None = None) -> UserProfile:
    """Return the default profile, creating it if needed.

    Args:
        repo: A UserProfileRepository
        goal: If given, the stored profile's goal is updated to it

    Returns:
        The default profile with its ID set
    """
    profile = await repo.get_by_name(DEFAULT_PROFILE_NAME)
    if profile is None:
        profile = default_profile(goal)
        profile.id = await repo.create(profile)
        logger.info("Created default profile %s", profile.id)
        return profile

    if goal is not None and profile.goal != goal:
        profile.goal = goal
        await repo.update(profile)
    return profile


async def apply_profile_overrides(
    repo,
    profile_id: int,
    equipment: list[EquipmentType] | None = None,
    limitations: list[Limitation] | None = None,
) -> UserProfile:
    """Store equipment and limitation changes made right before generating.

    Fields left as None keep their stored value.

    Raises:
        ProfileNotFound: If the profile does not exist
    """
    profile = await repo.get(profile_id)
    if profile is None:
        raise ProfileNotFound(profile_id)
    if equipment is None and limitations is None:
        return profile

    if equipment is not None:
        profile.available_equipment = normalize_equipment(equipment)
    if limitations is not None:
        profile.limitations = list(dict.fromkeys(limitations))
    await repo.update(profile)
    logger.info("Updated equipment and limitations of profile %s", profile_id)
    return profile

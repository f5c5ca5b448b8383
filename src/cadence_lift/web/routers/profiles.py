"""Training profile routes."""

from fastapi import APIRouter, HTTPException

from ...db.repositories import UserProfileRepository
from ...errors import ProfileNotFound
from ...models.user_profile import UserProfile
from ...services.profiles import normalize_equipment
from ...services.schedule import generate_weekly_schedule
from ..schemas import ProfileCreate, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


def profile_to_response(profile: UserProfile) -> dict:
    return {
        "id": profile.id,
        **profile.to_dict(),
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
        "updated_at": profile.updated_at.isoformat() if profile.updated_at else None,
    }


async def _get_or_404(repo: UserProfileRepository, profile_id: int) -> UserProfile:
    profile = await repo.get(profile_id)
    if profile is None:
        raise ProfileNotFound(profile_id)
    return profile


@router.get("")
async def list_profiles():
    """All profiles, oldest first."""
    profiles = await UserProfileRepository().list_all()
    return [profile_to_response(p) for p in profiles]


@router.post("", status_code=201)
async def create_profile(body: ProfileCreate):
    """Create a profile."""
    data = body.model_dump(mode="json")
    profile = UserProfile.from_dict(data)
    profile.available_equipment = normalize_equipment(profile.available_equipment)
    try:
        profile.validate()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    repo = UserProfileRepository()
    profile_id = await repo.create(profile)
    return profile_to_response(await repo.get(profile_id))


@router.get("/{profile_id}")
async def get_profile(profile_id: int):
    """One profile."""
    return profile_to_response(await _get_or_404(UserProfileRepository(), profile_id))


@router.patch("/{profile_id}")
async def update_profile(profile_id: int, body: ProfileUpdate):
    """Update the fields present in the body."""
    repo = UserProfileRepository()
    profile = await _get_or_404(repo, profile_id)

    changes = body.model_dump(mode="json", exclude_unset=True)
    merged = UserProfile.from_dict(
        {**profile.to_dict(), **changes},
        id=profile.id,
        created_at=profile.created_at,
    )
    merged.available_equipment = normalize_equipment(merged.available_equipment)
    try:
        merged.validate()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    await repo.update(merged)
    return profile_to_response(await repo.get(profile_id))


@router.get("/{profile_id}/schedule")
async def get_schedule(profile_id: int):
    """The profile's training week, Sunday first."""
    profile = await _get_or_404(UserProfileRepository(), profile_id)
    return [day.to_dict() for day in generate_weekly_schedule(profile.training_days_per_week)]

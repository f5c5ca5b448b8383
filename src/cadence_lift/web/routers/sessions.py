"""Workout session routes."""

from fastapi import APIRouter

from ...config import get_settings
from ...db.repositories import FeedbackRepository, SessionRepository, UserProfileRepository
from ...errors import SessionNotFound
from ...services.feedback import record_feedback
from ...services.generation import build_generator
from ...services.profiles import apply_profile_overrides, ensure_default_profile
from ..schemas import FeedbackRequest, GenerateRequest

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("/generate", status_code=201)
async def generate_session(body: GenerateRequest):
    """Generate and store the next session for a profile."""
    profiles = UserProfileRepository()
    profile_id = body.profile_id
    if profile_id is None:
        profile = await ensure_default_profile(profiles, body.goal)
        profile_id = profile.id
    await apply_profile_overrides(
        profiles, profile_id, body.available_equipment, body.limitations
    )

    generator = build_generator(seed=get_settings().seed)
    session = await generator.generate(
        profile_id, duration_min=body.duration_min, goal=body.goal
    )
    return session.to_dict()


@router.get("/{session_id}")
async def get_session(session_id: int):
    """A session with its items and feedback."""
    session = await SessionRepository().get(session_id)
    if session is None:
        raise SessionNotFound(session_id)
    return session.to_dict()


@router.post("/{session_id}/feedback", status_code=201)
async def submit_feedback(session_id: int, body: FeedbackRequest):
    """Attach post-workout feedback to a session."""
    records = [item.to_record() for item in body.feedback]
    session = await record_feedback(FeedbackRepository(), session_id, records)
    return session.to_dict()

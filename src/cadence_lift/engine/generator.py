"""Workout generation: turns profile, catalog and feedback into a session."""

import asyncio
import logging
import random

from ..errors import ProfileNotFound
from ..models.session import Phase, WorkoutSession
from ..models.user_profile import Goal
from ..stores import CatalogStore, FeedbackStore, ProfileStore, SessionStore
from .assembler import assemble_session
from .eligibility import filter_for_profile
from .fatigue import FEEDBACK_WINDOW, assess_readiness
from .periodization import period_state
from .prescription import build_prescription, next_load_modifier
from .progression import (
    PATH_FEEDBACK_LIMIT,
    apply_progression_paths,
    latest_difficulty_by_path,
)
from .selection import ExerciseSelector, target_exercise_count

logger = logging.getLogger(__name__)


class WorkoutGenerator:
    """Generates the next workout session for a profile.

    Holds no state between calls apart from the injected stores and random
    source. Concurrent calls for the same profile are not serialized here;
    callers needing one generation at a time per profile must lock around
    `generate`.
    """

    def __init__(
        self,
        profiles: ProfileStore,
        catalog: CatalogStore,
        feedback: FeedbackStore,
        sessions: SessionStore,
        rng: random.Random | None = None,
    ):
        self.profiles = profiles
        self.catalog = catalog
        self.feedback = feedback
        self.sessions = sessions
        self.selector = ExerciseSelector(rng)

    async def generate(
        self,
        profile_id: int,
        duration_min: int | None = None,
        goal: Goal | None = None,
    ) -> WorkoutSession:
        """Generate and persist the next session.

        Args:
            profile_id: Profile to generate for
            duration_min: Session length; defaults to the profile's setting
            goal: Goal override; defaults to the profile's goal

        Returns:
            The stored session

        Raises:
            ProfileNotFound: If the profile does not exist
            NoEligibleExercises: If no catalog exercise suits the profile
        """
        profile, exercises, recent, session_count = await asyncio.gather(
            self.profiles.get(profile_id),
            self.catalog.list_all(),
            self.feedback.recent(profile_id, FEEDBACK_WINDOW),
            self.sessions.count_for(profile_id),
        )
        if profile is None:
            raise ProfileNotFound(profile_id)

        goal = goal or profile.goal
        duration_min = duration_min or profile.session_duration

        eligible = filter_for_profile(exercises, profile)
        readiness = assess_readiness(recent)
        period = period_state(
            session_count, profile.training_days_per_week, profile.cycle_length_weeks
        )
        logger.debug(
            "Profile %s: %d eligible exercises, fatigue %.2f (deload=%s), %s",
            profile_id,
            len(eligible),
            readiness.fatigue_score,
            readiness.deload,
            period.get_position_display(),
        )

        any_deload = readiness.deload or period.phase == Phase.DELOAD
        prescription = build_prescription(goal, period.phase, any_deload)
        load_modifier = next_load_modifier(readiness.summary.last_difficulty, any_deload)

        count = target_exercise_count(duration_min)
        skeleton = self.selector.build_skeleton(eligible, count)

        paths = sorted({ex.progression_path for ex in skeleton if ex.progression_path})
        path_feedback = []
        if paths:
            path_feedback = await self.feedback.recent_by_paths(
                profile_id, paths, PATH_FEEDBACK_LIMIT
            )
        latest_by_path = latest_difficulty_by_path(path_feedback, exercises, paths)

        progressed = apply_progression_paths(skeleton, eligible, latest_by_path)
        selection = self.selector.fill_shortfall(progressed, eligible, count)
        logger.debug(
            "Profile %s: selected %s", profile_id, [ex.slug for ex in selection]
        )

        session = assemble_session(
            profile_id=profile_id,
            exercises=selection,
            prescription=prescription,
            readiness=readiness,
            period=period,
            load_modifier=load_modifier,
            goal=goal,
            duration_min=duration_min,
        )

        stored = await self.sessions.create(session)
        logger.info(
            "Created session %s for profile %s (%d exercises)",
            stored.id,
            profile_id,
            len(stored.items),
        )
        return stored

"""Pytest configuration and fixtures."""

import random
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from cadence_lift.errors import SessionNotFound
from cadence_lift.models.exercises import (
    COMMON_EXERCISES,
    EquipmentType,
    Exercise,
    Limitation,
    MovementPattern,
)
from cadence_lift.models.feedback import Difficulty, FeedbackRecord
from cadence_lift.models.session import WorkoutSession
from cadence_lift.models.user_profile import Goal, UserProfile


class InMemoryProfiles:
    def __init__(self, profiles=None):
        self.profiles = {p.id: p for p in (profiles or [])}

    async def get(self, profile_id):
        return self.profiles.get(profile_id)


class InMemoryCatalog:
    def __init__(self, exercises):
        self.exercises = list(exercises)

    async def list_all(self):
        return list(self.exercises)


class InMemorySessions:
    def __init__(self):
        self.sessions: list[WorkoutSession] = []

    async def count_for(self, profile_id):
        return sum(1 for s in self.sessions if s.profile_id == profile_id)

    async def create(self, session):
        session.id = len(self.sessions) + 1
        session.created_at = datetime.now()
        self.sessions.append(session)
        return session

    def get(self, session_id):
        for session in self.sessions:
            if session.id == session_id:
                return session
        return None


class InMemoryFeedback:
    """Feedback store keyed by session; needs the sessions and catalog to join."""

    def __init__(self, sessions: InMemorySessions, catalog: InMemoryCatalog):
        self.sessions = sessions
        self.catalog = catalog
        self.records: list[FeedbackRecord] = []

    def _for_profile(self, profile_id):
        owned = {s.id for s in self.sessions.sessions if s.profile_id == profile_id}
        records = [r for r in self.records if r.session_id in owned]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def recent(self, profile_id, limit):
        return self._for_profile(profile_id)[:limit]

    async def recent_by_paths(self, profile_id, path_names, limit):
        path_by_slug = {ex.slug: ex.progression_path for ex in self.catalog.exercises}
        records = [
            r
            for r in self._for_profile(profile_id)
            if path_by_slug.get(r.exercise_slug) in path_names
        ]
        return records[:limit]

    async def append(self, session_id, records):
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        for record in records:
            record.session_id = session_id
            record.id = len(self.records) + 1
            self.records.append(record)
        session.feedback.extend(records)
        return session


def build_feedback(
    slug: str,
    difficulty: Difficulty = Difficulty.JUST_RIGHT,
    avg_rpe: float = 7.0,
    session_id: int | None = 1,
    minutes_ago: int = 0,
) -> FeedbackRecord:
    """Build a valid feedback record, older by `minutes_ago`."""
    return FeedbackRecord(
        exercise_slug=slug,
        avg_rpe=avg_rpe,
        completed_sets=3,
        completed_reps=30,
        difficulty=difficulty,
        session_id=session_id,
        created_at=datetime(2026, 1, 1, 12, 0) - timedelta(minutes=minutes_ago),
    )


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def temp_data_dir(monkeypatch):
    """Point the settings at a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("CADENCE_LIFT_DATA_DIR", tmpdir)
        yield Path(tmpdir)


@pytest.fixture
def sample_profile():
    """Create a sample bodyweight profile for testing."""
    return UserProfile(
        id=1,
        name="Test User",
        goal=Goal.HYPERTROPHY,
        training_days_per_week=3,
        cycle_length_weeks=6,
        session_duration=40,
        available_equipment=[EquipmentType.BODYWEIGHT],
    )


@pytest.fixture
def equipped_profile():
    """Create a profile with a home gym and a knee limitation."""
    return UserProfile(
        id=2,
        name="Home Gym",
        goal=Goal.STRENGTH,
        training_days_per_week=4,
        cycle_length_weeks=8,
        session_duration=60,
        available_equipment=[
            EquipmentType.DUMBBELL,
            EquipmentType.PULLUP_BAR,
            EquipmentType.BENCH,
            EquipmentType.KETTLEBELL,
        ],
        limitations=[Limitation.KNEE_PAIN],
    )


@pytest.fixture
def catalog():
    """The built-in exercise catalog."""
    return list(COMMON_EXERCISES)


@pytest.fixture
def push_ladder():
    """A three-rung push-up progression path."""
    return [
        Exercise(
            slug=slug,
            name=slug.replace("-", " ").title(),
            movement_pattern=MovementPattern.PUSH,
            progression_path="push-up",
            progression_step=step,
        )
        for step, slug in enumerate(["wall-push-up", "incline-push-up", "push-up"], 1)
    ]


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def stores(sample_profile, catalog):
    """In-memory stores holding the sample profile and the catalog."""
    profiles = InMemoryProfiles([sample_profile])
    catalog_store = InMemoryCatalog(catalog)
    sessions = InMemorySessions()
    feedback = InMemoryFeedback(sessions, catalog_store)
    return profiles, catalog_store, feedback, sessions


@pytest.fixture
def make_feedback():
    """Factory for valid feedback records."""
    return build_feedback

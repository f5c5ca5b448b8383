"""Wiring of the workout generator to the SQLite stores."""

import random
from pathlib import Path

from ..db import (
    ExerciseRepository,
    FeedbackRepository,
    SessionRepository,
    UserProfileRepository,
    get_db_path,
)
from ..engine import WorkoutGenerator


def build_generator(db_path: Path | None = None, seed: int | None = None) -> WorkoutGenerator:
    """Create a WorkoutGenerator backed by the database at `db_path`."""
    db_path = db_path or get_db_path()
    return WorkoutGenerator(
        profiles=UserProfileRepository(db_path),
        catalog=ExerciseRepository(db_path),
        feedback=FeedbackRepository(db_path),
        sessions=SessionRepository(db_path),
        rng=random.Random(seed) if seed is not None else None,
    )

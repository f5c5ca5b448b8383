"""Database engine setup and initialization."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..config import DB_FILENAME, get_settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # User profiles table
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                goal TEXT NOT NULL DEFAULT 'hypertrophy',
                training_days_per_week INTEGER NOT NULL DEFAULT 3,
                cycle_length_weeks INTEGER NOT NULL DEFAULT 6,
                session_duration INTEGER NOT NULL DEFAULT 40,
                available_equipment TEXT NOT NULL DEFAULT '["bodyweight"]',
                limitations TEXT NOT NULL DEFAULT '[]',
                excluded_exercises TEXT NOT NULL DEFAULT '[]',
                age INTEGER,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                slug TEXT UNIQUE NOT NULL,
                name TEXT NOT NULL,
                movement_pattern TEXT NOT NULL,
                equipment TEXT NOT NULL DEFAULT '[]',
                contraindications TEXT NOT NULL DEFAULT '[]',
                progression_path TEXT,
                progression_step INTEGER,
                min_reps INTEGER NOT NULL DEFAULT 6,
                max_reps INTEGER NOT NULL DEFAULT 12,
                primary_muscle TEXT DEFAULT '',
                description TEXT DEFAULT '',
                strain_score INTEGER DEFAULT 2
            )
        """)

        # Generated sessions
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER NOT NULL,
                block_week INTEGER NOT NULL,
                phase TEXT NOT NULL,
                fatigue_score REAL NOT NULL,
                deload INTEGER NOT NULL DEFAULT 0,
                target_rpe REAL NOT NULL,
                goal TEXT NOT NULL,
                duration_min INTEGER NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (profile_id) REFERENCES user_profiles(id) ON DELETE CASCADE
            )
        """)

        # Prescribed exercises of a session
        await db.execute("""
            CREATE TABLE IF NOT EXISTS session_items (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                session_id INTEGER NOT NULL,
                position INTEGER NOT NULL,
                exercise_slug TEXT NOT NULL,
                exercise_name TEXT NOT NULL,
                movement_pattern TEXT NOT NULL,
                sets INTEGER NOT NULL,
                reps_min INTEGER NOT NULL,
                reps_max INTEGER NOT NULL,
                rest_sec INTEGER NOT NULL,
                load_modifier REAL NOT NULL DEFAULT 1.0,
                FOREIGN KEY (session_id) REFERENCES workout_sessions(id) ON DELETE CASCADE
            )
        """)

        # Post-workout feedback (append-only)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_feedback (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                session_id INTEGER NOT NULL,
                exercise_slug TEXT NOT NULL,
                avg_rpe REAL NOT NULL,
                completed_sets INTEGER NOT NULL,
                completed_reps INTEGER NOT NULL,
                difficulty TEXT NOT NULL,
                notes TEXT DEFAULT '',
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (session_id) REFERENCES workout_sessions(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_path
            ON exercises(progression_path)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sessions_profile
            ON workout_sessions(profile_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_session_items_session
            ON session_items(session_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_feedback_session
            ON workout_feedback(session_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_feedback_created
            ON workout_feedback(created_at)
        """)

        await db.commit()


async def seed_exercises(db_path: Path | None = None, exercises=None) -> tuple[int, int]:
    """Upsert the exercise catalog by slug.

    Safe to run any time: existing exercises are updated, none are deleted.

    Returns:
        (created, updated) counts
    """
    from ..models.exercises import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()
    if exercises is None:
        exercises = COMMON_EXERCISES

    created = 0
    updated = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in exercises:
            cursor = await db.execute(
                "SELECT 1 FROM exercises WHERE slug = ?", (exercise.slug,)
            )
            exists = await cursor.fetchone() is not None

            data = exercise.to_dict()
            await db.execute(
                """
                INSERT INTO exercises
                (slug, name, movement_pattern, equipment, contraindications,
                 progression_path, progression_step, min_reps, max_reps,
                 primary_muscle, description, strain_score)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(slug) DO UPDATE SET
                    name = excluded.name,
                    movement_pattern = excluded.movement_pattern,
                    equipment = excluded.equipment,
                    contraindications = excluded.contraindications,
                    progression_path = excluded.progression_path,
                    progression_step = excluded.progression_step,
                    min_reps = excluded.min_reps,
                    max_reps = excluded.max_reps,
                    primary_muscle = excluded.primary_muscle,
                    description = excluded.description,
                    strain_score = excluded.strain_score
                """,
                (
                    data["slug"],
                    data["name"],
                    data["movement_pattern"],
                    json.dumps(data["equipment"]),
                    json.dumps(data["contraindications"]),
                    data["progression_path"],
                    data["progression_step"],
                    data["min_reps"],
                    data["max_reps"],
                    data["primary_muscle"],
                    data["description"],
                    data["strain_score"],
                ),
            )
            if exists:
                updated += 1
            else:
                created += 1
                logger.debug("Added exercise %s", exercise.slug)

        await db.commit()

    return created, updated

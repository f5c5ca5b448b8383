"""Data access layer for cadence-lift."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..errors import SessionNotFound
from ..models.exercises import Exercise, MovementPattern
from ..models.feedback import Difficulty, FeedbackRecord
from ..models.session import Phase, SessionItem, WorkoutSession
from ..models.user_profile import Goal, UserProfile
from .engine import get_db_path


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class UserProfileRepository:
    """Repository for user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, profile: UserProfile) -> int:
        """Create a new user profile."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO user_profiles
                (name, goal, training_days_per_week, cycle_length_weeks,
                 session_duration, available_equipment, limitations,
                 excluded_exercises, age)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["name"],
                    data["goal"],
                    data["training_days_per_week"],
                    data["cycle_length_weeks"],
                    data["session_duration"],
                    json.dumps(data["available_equipment"]),
                    json.dumps(data["limitations"]),
                    json.dumps(data["excluded_exercises"]),
                    data["age"],
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, profile_id: int) -> UserProfile | None:
        """Get a user profile by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE id = ?", (profile_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def get_by_name(self, name: str) -> UserProfile | None:
        """Get the oldest profile with the given name."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE name = ? ORDER BY id LIMIT 1",
                (name,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def list_all(self) -> list[UserProfile]:
        """List all user profiles, oldest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM user_profiles ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_profile(row) for row in rows]

    async def update(self, profile: UserProfile) -> None:
        """Update an existing profile."""
        if profile.id is None:
            raise ValueError("Profile must have an ID to update")

        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE user_profiles SET
                    name = ?, goal = ?, training_days_per_week = ?,
                    cycle_length_weeks = ?, session_duration = ?,
                    available_equipment = ?, limitations = ?,
                    excluded_exercises = ?, age = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    data["name"],
                    data["goal"],
                    data["training_days_per_week"],
                    data["cycle_length_weeks"],
                    data["session_duration"],
                    json.dumps(data["available_equipment"]),
                    json.dumps(data["limitations"]),
                    json.dumps(data["excluded_exercises"]),
                    data["age"],
                    profile.id,
                ),
            )
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        data = {
            "name": row["name"],
            "goal": row["goal"],
            "training_days_per_week": row["training_days_per_week"],
            "cycle_length_weeks": row["cycle_length_weeks"],
            "session_duration": row["session_duration"],
            "available_equipment": json.loads(row["available_equipment"]),
            "limitations": json.loads(row["limitations"]),
            "excluded_exercises": json.loads(row["excluded_exercises"]),
            "age": row["age"],
        }
        return UserProfile.from_dict(
            data,
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Exercise]:
        """List the full catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get_by_slug(self, slug: str) -> Exercise | None:
        """Get an exercise by slug."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises WHERE slug = ?", (slug,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def get_by_movement_pattern(self, pattern: MovementPattern) -> list[Exercise]:
        """Get exercises with a specific movement pattern."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE movement_pattern = ? ORDER BY name",
                (pattern.value,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def count(self) -> int:
        """Number of exercises in the catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM exercises")
            row = await cursor.fetchone()
            return row[0]

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        data = {
            "slug": row["slug"],
            "name": row["name"],
            "movement_pattern": row["movement_pattern"],
            "equipment": json.loads(row["equipment"]),
            "contraindications": json.loads(row["contraindications"]),
            "progression_path": row["progression_path"],
            "progression_step": row["progression_step"],
            "min_reps": row["min_reps"],
            "max_reps": row["max_reps"],
            "primary_muscle": row["primary_muscle"] or "",
            "description": row["description"] or "",
            "strain_score": row["strain_score"],
        }
        return Exercise.from_dict(data, id=row["id"])


class SessionRepository:
    """Repository for generated workout sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def count_for(self, profile_id: int) -> int:
        """Number of sessions generated for a profile."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT COUNT(*) FROM workout_sessions WHERE profile_id = ?",
                (profile_id,),
            )
            row = await cursor.fetchone()
            return row[0]

    async def create(self, session: WorkoutSession) -> WorkoutSession:
        """Store a session and its items in a single transaction."""
        created_at = session.created_at or datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    """
                    INSERT INTO workout_sessions
                    (profile_id, block_week, phase, fatigue_score, deload,
                     target_rpe, goal, duration_min, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        session.profile_id,
                        session.block_week,
                        session.phase.value,
                        session.fatigue_score,
                        1 if session.deload else 0,
                        session.target_rpe,
                        session.goal.value,
                        session.duration_min,
                        created_at.isoformat(),
                    ),
                )
                session_id = cursor.lastrowid
                await db.executemany(
                    """
                    INSERT INTO session_items
                    (session_id, position, exercise_slug, exercise_name,
                     movement_pattern, sets, reps_min, reps_max, rest_sec,
                     load_modifier)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            session_id,
                            position,
                            item.exercise_slug,
                            item.exercise_name,
                            item.movement_pattern.value,
                            item.sets,
                            item.reps_min,
                            item.reps_max,
                            item.rest_sec,
                            item.load_modifier,
                        )
                        for position, item in enumerate(session.items)
                    ],
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise

        stored = await self.get(session_id)
        return stored

    async def get(self, session_id: int) -> WorkoutSession | None:
        """Get a session with its items and attached feedback."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_sessions WHERE id = ?", (session_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            cursor = await db.execute(
                "SELECT * FROM session_items WHERE session_id = ? ORDER BY position",
                (session_id,),
            )
            item_rows = await cursor.fetchall()

            cursor = await db.execute(
                "SELECT * FROM workout_feedback WHERE session_id = ? ORDER BY id",
                (session_id,),
            )
            feedback_rows = await cursor.fetchall()

        session = self._row_to_session(row)
        session.items = [self._row_to_item(r) for r in item_rows]
        session.feedback = [row_to_feedback(r) for r in feedback_rows]
        return session

    async def list_for_profile(self, profile_id: int, limit: int = 20) -> list[WorkoutSession]:
        """Most recent sessions of a profile, newest first, without items."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sessions
                WHERE profile_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (profile_id, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_session(row) for row in rows]

    def _row_to_session(self, row: aiosqlite.Row) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        return WorkoutSession(
            id=row["id"],
            profile_id=row["profile_id"],
            block_week=row["block_week"],
            phase=Phase(row["phase"]),
            fatigue_score=row["fatigue_score"],
            deload=bool(row["deload"]),
            target_rpe=row["target_rpe"],
            goal=Goal(row["goal"]),
            duration_min=row["duration_min"],
            created_at=_parse_timestamp(row["created_at"]),
        )

    def _row_to_item(self, row: aiosqlite.Row) -> SessionItem:
        """Convert a database row to a SessionItem."""
        return SessionItem(
            id=row["id"],
            exercise_slug=row["exercise_slug"],
            exercise_name=row["exercise_name"],
            movement_pattern=MovementPattern(row["movement_pattern"]),
            sets=row["sets"],
            reps_min=row["reps_min"],
            reps_max=row["reps_max"],
            rest_sec=row["rest_sec"],
            load_modifier=row["load_modifier"],
        )


class FeedbackRepository:
    """Repository for append-only workout feedback."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def recent(self, profile_id: int, limit: int) -> list[FeedbackRecord]:
        """Most recent feedback for a profile, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT f.* FROM workout_feedback f
                JOIN workout_sessions s ON s.id = f.session_id
                WHERE s.profile_id = ?
                ORDER BY f.created_at DESC, f.id DESC
                LIMIT ?
                """,
                (profile_id, limit),
            )
            rows = await cursor.fetchall()
            return [row_to_feedback(row) for row in rows]

    async def recent_by_paths(
        self, profile_id: int, path_names: list[str], limit: int
    ) -> list[FeedbackRecord]:
        """Most recent feedback on exercises of the given progression paths."""
        if not path_names:
            return []

        placeholders = ", ".join("?" for _ in path_names)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"""
                SELECT f.* FROM workout_feedback f
                JOIN workout_sessions s ON s.id = f.session_id
                JOIN exercises e ON e.slug = f.exercise_slug
                WHERE s.profile_id = ? AND e.progression_path IN ({placeholders})
                ORDER BY f.created_at DESC, f.id DESC
                LIMIT ?
                """,
                (profile_id, *path_names, limit),
            )
            rows = await cursor.fetchall()
            return [row_to_feedback(row) for row in rows]

    async def append(
        self, session_id: int, records: list[FeedbackRecord]
    ) -> WorkoutSession:
        """Attach feedback records to a session.

        Raises:
            SessionNotFound: If the session does not exist
        """
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT 1 FROM workout_sessions WHERE id = ?", (session_id,)
            )
            if await cursor.fetchone() is None:
                raise SessionNotFound(session_id)

            await db.executemany(
                """
                INSERT INTO workout_feedback
                (session_id, exercise_slug, avg_rpe, completed_sets,
                 completed_reps, difficulty, notes, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        session_id,
                        record.exercise_slug,
                        record.avg_rpe,
                        record.completed_sets,
                        record.completed_reps,
                        record.difficulty.value,
                        record.notes,
                        record.created_at.isoformat(),
                    )
                    for record in records
                ],
            )
            await db.commit()

        return await SessionRepository(self.db_path).get(session_id)


def row_to_feedback(row: aiosqlite.Row) -> FeedbackRecord:
    """Convert a database row to a FeedbackRecord."""
    return FeedbackRecord(
        id=row["id"],
        session_id=row["session_id"],
        exercise_slug=row["exercise_slug"],
        avg_rpe=row["avg_rpe"],
        completed_sets=row["completed_sets"],
        completed_reps=row["completed_reps"],
        difficulty=Difficulty(row["difficulty"]),
        notes=row["notes"] or "",
        created_at=datetime.fromisoformat(row["created_at"]),
    )

"""Tests for WorkoutGenerator with in-memory stores."""

import asyncio
import random

import pytest

from cadence_lift.engine.generator import WorkoutGenerator
from cadence_lift.engine.selection import target_exercise_count
from cadence_lift.errors import NoEligibleExercises, ProfileNotFound
from cadence_lift.models.exercises import EquipmentType, Exercise, MovementPattern
from cadence_lift.models.feedback import Difficulty, FeedbackRecord
from cadence_lift.models.session import Phase
from cadence_lift.models.user_profile import Goal
from cadence_lift.services.feedback import record_feedback
from cadence_lift.stores import CatalogStore, FeedbackStore, ProfileStore, SessionStore


def _generator(stores, seed=42):
    profiles, catalog, feedback, sessions = stores
    return WorkoutGenerator(profiles, catalog, feedback, sessions, rng=random.Random(seed))


class TestWorkoutGenerator:
    """Tests for session generation."""

    def test_in_memory_stores_satisfy_protocols(self, stores):
        profiles, catalog, feedback, sessions = stores
        assert isinstance(profiles, ProfileStore)
        assert isinstance(catalog, CatalogStore)
        assert isinstance(feedback, FeedbackStore)
        assert isinstance(sessions, SessionStore)

    def test_first_session(self, stores):
        session = asyncio.run(_generator(stores).generate(1))

        assert session.id == 1
        assert session.block_week == 1
        assert session.phase == Phase.ACCUMULATION
        assert not session.deload
        assert session.fatigue_score == 0.5
        assert session.target_rpe == 8.0
        assert session.goal == Goal.HYPERTROPHY
        assert len(session.items) == target_exercise_count(40)
        assert all(item.load_modifier == 1.0 for item in session.items)

    def test_items_are_eligible_and_unique(self, stores):
        profiles, catalog, _, _ = stores
        catalog.exercises.append(
            Exercise(
                slug="barbell-only",
                name="Barbell Only",
                movement_pattern=MovementPattern.LEGS,
                equipment=[EquipmentType.BARBELL],
            )
        )
        for seed in range(10):
            session = asyncio.run(_generator(stores, seed).generate(1, duration_min=90))
            slugs = session.exercise_slugs
            assert len(slugs) == len(set(slugs))
            assert "barbell-only" not in slugs
            assert "barbell-back-squat" not in slugs

    def test_overrides(self, stores):
        session = asyncio.run(
            _generator(stores).generate(1, duration_min=20, goal=Goal.STRENGTH)
        )
        assert len(session.items) == 4
        assert session.goal == Goal.STRENGTH
        assert session.duration_min == 20
        assert session.target_rpe == 8.2

    def test_unknown_profile(self, stores):
        with pytest.raises(ProfileNotFound):
            asyncio.run(_generator(stores).generate(99))

    def test_no_eligible_exercises(self, stores):
        _, catalog, _, _ = stores
        catalog.exercises = [
            Exercise(
                slug="barbell-row",
                name="Barbell Row",
                movement_pattern=MovementPattern.PULL,
                equipment=[EquipmentType.BARBELL],
            )
        ]
        with pytest.raises(NoEligibleExercises):
            asyncio.run(_generator(stores).generate(1))

    def test_week_advances_with_sessions(self, stores):
        generator = _generator(stores)

        async def run():
            return [await generator.generate(1) for _ in range(4)]

        weeks = [s.block_week for s in asyncio.run(run())]
        assert weeks == [1, 1, 1, 2]

    def test_last_week_is_deload(self, stores, sample_profile):
        sample_profile.training_days_per_week = 1
        sample_profile.cycle_length_weeks = 4
        generator = _generator(stores)

        async def run():
            return [await generator.generate(1) for _ in range(4)]

        last = asyncio.run(run())[-1]
        assert last.block_week == 4
        assert last.phase == Phase.DELOAD
        assert last.deload
        assert last.target_rpe == 6.0
        assert all(item.load_modifier == 0.6 for item in last.items)

    def test_hard_feedback_triggers_deload(self, stores):
        _, _, feedback, _ = stores
        generator = _generator(stores)

        async def run():
            first = await generator.generate(1)
            await record_feedback(
                feedback,
                first.id,
                [
                    _record(slug, Difficulty.TOO_HARD, 9)
                    for slug in first.exercise_slugs[:3]
                ],
            )
            return await generator.generate(1)

        second = asyncio.run(run())
        assert second.deload
        assert second.fatigue_score >= 2.4
        assert second.target_rpe == 6.0
        assert all(item.load_modifier == 0.6 for item in second.items)

    def test_easy_feedback_progresses_path(self, stores):
        """Too-easy feedback on a push-up rung moves the next session up the path."""
        _, _, feedback, _ = stores
        generator = _generator(stores)

        async def run():
            first = await generator.generate(1)
            await record_feedback(
                feedback, first.id, [_record("wall-push-up", Difficulty.TOO_EASY, 5)]
            )
            return await generator.generate(1)

        second = asyncio.run(run())
        push_items = [i for i in second.items if i.movement_pattern == MovementPattern.PUSH]
        assert [i.exercise_slug for i in push_items] == ["push-up"]
        assert all(item.load_modifier == 1.05 for item in second.items)

    @pytest.mark.parametrize("seed", range(12))
    def test_feedback_on_excluded_rung_still_progresses(
        self, stores, sample_profile, push_ladder, seed
    ):
        """Feedback on a rung the profile has since excluded still moves the path."""
        _, catalog, feedback, _ = stores
        catalog.exercises = push_ladder + [
            Exercise(slug=f"core-{i}", name=f"Core {i}", movement_pattern=MovementPattern.CORE)
            for i in range(10)
        ]
        generator = _generator(stores, seed)

        async def run():
            first = await generator.generate(1)
            await record_feedback(
                feedback, first.id, [_record("incline-push-up", Difficulty.TOO_EASY, 5)]
            )
            sample_profile.excluded_exercises = ["incline-push-up"]
            return await generator.generate(1)

        second = asyncio.run(run())
        # No legs in this catalog, so the push slot leads the session
        assert second.exercise_slugs[0] == "push-up"
        assert "incline-push-up" not in second.exercise_slugs


def _record(slug, difficulty, rpe):
    return FeedbackRecord(
        exercise_slug=slug,
        avg_rpe=rpe,
        completed_sets=3,
        completed_reps=24,
        difficulty=difficulty,
    )

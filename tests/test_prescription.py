"""Tests for the prescription calculator and session assembler."""

import pytest

from cadence_lift.engine.assembler import assemble_session, build_item
from cadence_lift.engine.fatigue import FeedbackSummary, Readiness
from cadence_lift.engine.periodization import PeriodState
from cadence_lift.engine.prescription import (
    DELOAD_TARGET_RPE,
    Prescription,
    adjust_by_phase,
    build_prescription,
    next_load_modifier,
    rep_range_by_goal,
    target_rpe_by_goal,
)
from cadence_lift.models.exercises import Exercise, MovementPattern
from cadence_lift.models.feedback import Difficulty
from cadence_lift.models.session import Phase
from cadence_lift.models.user_profile import Goal


class TestPrescription:
    """Tests for goal and phase prescription."""

    @pytest.mark.parametrize(
        "goal,expected",
        [
            (Goal.STRENGTH, (4, 8, 4)),
            (Goal.ENDURANCE, (12, 20, 3)),
            (Goal.HYPERTROPHY, (6, 12, 3)),
        ],
    )
    def test_rep_range_by_goal(self, goal, expected):
        assert rep_range_by_goal(goal) == expected

    def test_target_rpe(self):
        assert target_rpe_by_goal(Goal.STRENGTH, False) == 8.2
        assert target_rpe_by_goal(Goal.ENDURANCE, False) == 7.2
        assert target_rpe_by_goal(Goal.HYPERTROPHY, False) == 8.0
        assert target_rpe_by_goal(Goal.STRENGTH, True) == DELOAD_TARGET_RPE

    def test_accumulation_is_unchanged(self):
        prescription = build_prescription(Goal.HYPERTROPHY, Phase.ACCUMULATION, False)
        assert prescription == Prescription(
            sets=3, reps_min=6, reps_max=12, target_rpe=8.0, rest_sec=75
        )

    def test_intensification(self):
        prescription = build_prescription(Goal.STRENGTH, Phase.INTENSIFICATION, False)
        assert prescription.reps_min == 3
        assert prescription.reps_max == 6
        assert prescription.target_rpe == 8.5
        assert prescription.rest_sec == 144

    def test_intensification_rpe_capped(self):
        base = Prescription(sets=3, reps_min=6, reps_max=12, target_rpe=8.9, rest_sec=75)
        assert adjust_by_phase(Phase.INTENSIFICATION, base).target_rpe == 9.0

    def test_deload_phase(self):
        prescription = build_prescription(Goal.HYPERTROPHY, Phase.DELOAD, True)
        assert prescription.sets == 2
        assert prescription.reps_min == 5
        assert prescription.reps_max == 10
        assert prescription.target_rpe == DELOAD_TARGET_RPE
        assert prescription.rest_sec == 67

    def test_deload_floors(self):
        base = Prescription(sets=2, reps_min=3, reps_max=5, target_rpe=8.0, rest_sec=60)
        adjusted = adjust_by_phase(Phase.DELOAD, base)
        assert adjusted.sets == 2
        assert adjusted.reps_min == 4
        assert adjusted.reps_max == 6
        assert adjusted.target_rpe == 6.8

    @pytest.mark.parametrize(
        "difficulty,deload,expected",
        [
            (None, False, 1.0),
            (Difficulty.TOO_EASY, False, 1.05),
            (Difficulty.TOO_HARD, False, 0.9),
            (Difficulty.JUST_RIGHT, False, 1.0),
            (Difficulty.TOO_EASY, True, 0.6),
        ],
    )
    def test_next_load_modifier(self, difficulty, deload, expected):
        assert next_load_modifier(difficulty, deload) == expected


class TestAssembler:
    """Tests for session assembly."""

    def _readiness(self, deload=False, score=0.5):
        return Readiness(summary=FeedbackSummary(), fatigue_score=score, deload=deload)

    def test_reps_clamped_to_exercise(self):
        exercise = Exercise(
            slug="jumping-jacks",
            name="Jumping Jacks",
            movement_pattern=MovementPattern.CONDITIONING,
            min_reps=20,
            max_reps=40,
        )
        prescription = Prescription(sets=3, reps_min=6, reps_max=12, target_rpe=8, rest_sec=75)
        item = build_item(exercise, prescription, False, 1.0)
        assert (item.reps_min, item.reps_max) == (20, 20)

    def test_readiness_deload_drops_a_set(self):
        exercise = Exercise(slug="plank", name="Plank", movement_pattern=MovementPattern.CORE)
        prescription = Prescription(sets=3, reps_min=6, reps_max=12, target_rpe=6, rest_sec=75)
        assert build_item(exercise, prescription, True, 0.6).sets == 2
        assert build_item(exercise, prescription, False, 1.0).sets == 3

    def test_phase_deload_marks_session(self, push_ladder):
        period = PeriodState(week=6, phase=Phase.DELOAD, cycle_length_weeks=6)
        prescription = build_prescription(Goal.HYPERTROPHY, Phase.DELOAD, True)
        session = assemble_session(
            profile_id=1,
            exercises=push_ladder,
            prescription=prescription,
            readiness=self._readiness(),
            period=period,
            load_modifier=0.6,
        )

        assert session.deload
        assert session.block_week == 6
        assert session.phase == Phase.DELOAD
        assert session.exercise_slugs == [ex.slug for ex in push_ladder]
        # Phase deload is already in the prescription, no extra set drop
        assert all(item.sets == prescription.sets for item in session.items)
        assert all(item.load_modifier == 0.6 for item in session.items)


class TestPrescriptionGrid:
    """Properties that hold for every goal, phase and deload combination."""

    EXERCISES = [
        Exercise(
            slug="wide-range",
            name="Wide Range",
            movement_pattern=MovementPattern.LEGS,
            min_reps=1,
            max_reps=50,
        ),
        Exercise(
            slug="high-reps-only",
            name="High Reps Only",
            movement_pattern=MovementPattern.CONDITIONING,
            min_reps=25,
            max_reps=30,
        ),
        Exercise(
            slug="low-reps-only",
            name="Low Reps Only",
            movement_pattern=MovementPattern.PULL,
            min_reps=1,
            max_reps=3,
        ),
    ]

    def test_strength_accumulation(self):
        prescription = build_prescription(Goal.STRENGTH, Phase.ACCUMULATION, False)
        assert prescription == Prescription(
            sets=4, reps_min=4, reps_max=8, target_rpe=8.2, rest_sec=120
        )

    @pytest.mark.parametrize("readiness_deload", [False, True])
    @pytest.mark.parametrize("phase", list(Phase))
    @pytest.mark.parametrize("goal", list(Goal))
    def test_items_stay_in_bounds(self, goal, phase, readiness_deload):
        deload = readiness_deload or phase == Phase.DELOAD
        prescription = build_prescription(goal, phase, deload)

        if deload:
            assert prescription.target_rpe == DELOAD_TARGET_RPE
        assert prescription.target_rpe <= 9.0

        for exercise in self.EXERCISES:
            item = build_item(exercise, prescription, readiness_deload, 1.0)
            assert item.reps_min <= item.reps_max
            assert item.sets >= 2
            assert item.reps_min >= exercise.min_reps

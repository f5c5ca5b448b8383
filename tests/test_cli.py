"""Tests for the click CLI."""

import json

import pytest
from click.testing import CliRunner

from cadence_lift.cli import main


@pytest.fixture
def runner(temp_data_dir):
    """CLI runner against an initialized data directory."""
    runner = CliRunner()
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


class TestInit:
    def test_requires_init(self, temp_data_dir):
        result = CliRunner().invoke(main, ["profile", "list"])
        assert result.exit_code == 1
        assert "cadence-lift init" in result.output

    def test_init_creates_family_profile(self, runner):
        result = runner.invoke(main, ["profile", "list"])
        assert result.exit_code == 0
        assert "Family" in result.output

    def test_init_is_rerunnable(self, runner):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "0 new" in result.output


class TestProfileCommands:
    """Tests for the profile group."""

    def test_create_and_show(self, runner):
        result = runner.invoke(
            main,
            ["profile", "create", "-n", "Alex", "-g", "strength", "-e", "dumbbell", "-l", "knee_pain"],
        )
        assert result.exit_code == 0, result.output
        assert "Profile created: Alex (ID: 2)" in result.output

        result = runner.invoke(main, ["profile", "show", "2"])
        assert "Goal: strength" in result.output
        assert "knee_pain" in result.output

    def test_create_requires_name(self, runner):
        result = runner.invoke(main, ["profile", "create"])
        assert result.exit_code == 1

    def test_update(self, runner):
        result = runner.invoke(main, ["profile", "update", "1", "--days", "5"])
        assert result.exit_code == 0
        result = runner.invoke(main, ["profile", "show", "1"])
        assert "Training days: 5/week" in result.output

    def test_show_missing(self, runner):
        result = runner.invoke(main, ["profile", "show", "99"])
        assert result.exit_code == 1


class TestGenerateAndFeedback:
    """Tests for generate, feedback and sessions."""

    def test_generate_default_profile(self, runner):
        result = runner.invoke(main, ["generate", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert "Session generated (ID: 1)" in result.output
        assert "week 1, accumulation phase" in result.output

    def test_generate_unknown_profile(self, runner):
        result = runner.invoke(main, ["generate", "-p", "42"])
        assert result.exit_code == 1
        assert "Profile ID 42 not found" in result.output

    def test_feedback_and_json_export(self, runner):
        runner.invoke(main, ["generate", "--seed", "1"])
        show = runner.invoke(main, ["sessions", "show", "1", "--format", "json"])
        session = json.loads(show.output)
        slug = session["items"][0]["exercise_slug"]

        result = runner.invoke(
            main,
            ["feedback", "1", "-e", slug, "--rpe", "7", "--sets", "3", "--reps", "30"],
        )
        assert result.exit_code == 0, result.output

        show = runner.invoke(main, ["sessions", "show", "1", "--format", "json"])
        assert json.loads(show.output)["feedback"][0]["exercise_slug"] == slug

    def test_feedback_out_of_range(self, runner):
        runner.invoke(main, ["generate"])
        result = runner.invoke(
            main,
            ["feedback", "1", "-e", "push-up", "--rpe", "11", "--sets", "3", "--reps", "30"],
        )
        assert result.exit_code == 1
        assert "avg_rpe" in result.output

    def test_feedback_from_file(self, runner, tmp_path):
        runner.invoke(main, ["generate"])
        path = tmp_path / "feedback.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "exercise_slug": "plank",
                        "avg_rpe": 9,
                        "completed_sets": 3,
                        "completed_reps": 90,
                        "difficulty": "too_hard",
                    }
                ]
            )
        )
        result = runner.invoke(main, ["feedback", "1", "--file", str(path)])
        assert result.exit_code == 0, result.output

    def test_feedback_file_with_non_object_items(self, runner, tmp_path):
        runner.invoke(main, ["generate"])
        path = tmp_path / "feedback.json"
        path.write_text("[1]")
        result = runner.invoke(main, ["feedback", "1", "--file", str(path)])
        assert result.exit_code == 1
        assert "Could not read feedback file" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_sessions_list(self, runner):
        runner.invoke(main, ["generate"])
        runner.invoke(main, ["generate"])
        result = runner.invoke(main, ["sessions", "list", "-p", "1"])
        assert "Total: 2 session(s)" in result.output

    def test_sessions_clipboard(self, runner, monkeypatch):
        copied = []
        monkeypatch.setattr("pyperclip.copy", copied.append)
        runner.invoke(main, ["generate"])
        result = runner.invoke(main, ["sessions", "show", "1", "--clipboard"])
        assert result.exit_code == 0
        assert copied and "Session 1" in copied[0]


class TestSchedule:
    def test_schedule(self, runner):
        result = runner.invoke(main, ["schedule", "--days", "3"])
        assert result.exit_code == 0
        assert "3 training day(s) per week" in result.output
        assert "Mon  Push" in result.output

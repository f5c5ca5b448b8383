"""Record post-workout feedback."""

import json

import click

from ..db import FeedbackRepository, get_db_path
from ..errors import CadenceLiftError
from ..models.feedback import Difficulty, FeedbackRecord
from ..services.feedback import record_feedback
from .base import async_command, echo_error, echo_success, ensure_initialized

DIFFICULTY_CHOICE = click.Choice([d.value for d in Difficulty])


def _load_records(path: str) -> list[FeedbackRecord]:
    """Read feedback records from a JSON file holding a list of objects."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("feedback", [])
    return [FeedbackRecord.from_dict(item) for item in data]


@click.command()
@click.argument("session_id", type=int)
@click.option("--exercise", "-e", help="Exercise slug")
@click.option("--rpe", type=float, help="Average RPE across sets (1-10)")
@click.option("--sets", "completed_sets", type=int, help="Completed sets")
@click.option("--reps", "completed_reps", type=int, help="Completed reps in total")
@click.option(
    "--difficulty",
    type=DIFFICULTY_CHOICE,
    default=Difficulty.JUST_RIGHT.value,
    help="How the exercise felt",
)
@click.option("--notes", default="", help="Free-form notes")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with a list of feedback records",
)
@click.pass_context
@async_command
async def feedback(
    ctx,
    session_id: int,
    exercise: str | None,
    rpe: float | None,
    completed_sets: int | None,
    completed_reps: int | None,
    difficulty: str,
    notes: str,
    file_path: str | None,
):
    """Attach feedback to a completed session.

    Examples:

        # One exercise
        cadence-lift feedback 3 -e push-up --rpe 8 --sets 3 --reps 30 --difficulty too_hard

        # Whole session from a file
        cadence-lift feedback 3 --file feedback.json
    """
    ensure_initialized(ctx)

    if file_path:
        try:
            records = _load_records(file_path)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            echo_error(f"Could not read feedback file: {e}")
            ctx.exit(1)
    else:
        if not exercise or rpe is None or completed_sets is None or completed_reps is None:
            echo_error("--exercise, --rpe, --sets and --reps are required without --file")
            ctx.exit(1)
        records = [
            FeedbackRecord(
                exercise_slug=exercise,
                avg_rpe=rpe,
                completed_sets=completed_sets,
                completed_reps=completed_reps,
                difficulty=Difficulty(difficulty),
                notes=notes,
            )
        ]

    try:
        session = await record_feedback(FeedbackRepository(get_db_path()), session_id, records)
    except CadenceLiftError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Recorded {len(records)} feedback record(s) for session {session_id} "
        f"({len(session.feedback)} total)"
    )

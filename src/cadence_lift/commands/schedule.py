"""Weekly schedule command."""

import click

from ..db import UserProfileRepository, get_db_path
from ..services.profiles import ensure_default_profile
from ..services.schedule import generate_weekly_schedule
from .base import async_command, echo_error, ensure_initialized


@click.command()
@click.option("--profile-id", "-p", type=int, help="Profile (default: the Family profile)")
@click.option("--days", "-d", type=click.IntRange(1, 7), help="Training days per week override")
@click.pass_context
@async_command
async def schedule(ctx, profile_id: int | None, days: int | None):
    """Show the training week with today's focus."""
    ensure_initialized(ctx)

    repo = UserProfileRepository(get_db_path())
    if profile_id is None:
        profile = await ensure_default_profile(repo)
    else:
        profile = await repo.get(profile_id)
        if not profile:
            echo_error(f"Profile ID {profile_id} not found")
            ctx.exit(1)

    training_days = days or profile.training_days_per_week
    click.echo()
    click.echo(f"{profile.name}: {training_days} training day(s) per week")
    click.echo()
    for day in generate_weekly_schedule(training_days):
        marker = ">" if day.is_today else " "
        focus = day.focus if day.is_training_day else "rest"
        click.echo(f" {marker} {day.label}  {focus}")

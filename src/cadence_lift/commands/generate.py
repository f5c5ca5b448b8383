"""Generate session command."""

import click

from ..config import get_settings
from ..db import UserProfileRepository, get_db_path
from ..errors import CadenceLiftError
from ..models.user_profile import Goal
from ..services.generation import build_generator
from ..services.profiles import ensure_default_profile
from .base import (
    GOAL_CHOICE,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
)


@click.command()
@click.option(
    "--profile-id",
    "-p",
    type=int,
    help="Profile to generate for (default: the Family profile)",
)
@click.option(
    "--duration",
    "-d",
    type=click.IntRange(15, 120),
    help="Session length in minutes (default: the profile's setting)",
)
@click.option("--goal", "-g", type=GOAL_CHOICE, help="Override the profile's goal")
@click.option("--seed", type=int, help="Seed exercise selection for repeatable output")
@click.pass_context
@async_command
async def generate(
    ctx,
    profile_id: int | None,
    duration: int | None,
    goal: str | None,
    seed: int | None,
):
    """Generate the next workout session.

    The session is built from the profile's equipment and limitations, the
    current block week and recent feedback, then saved.

    Examples:

        # Next session for the default profile
        cadence-lift generate

        # 30 minute strength session for profile 2
        cadence-lift generate -p 2 -d 30 -g strength
    """
    ensure_initialized(ctx)

    db_path = get_db_path()
    goal_override = Goal(goal) if goal else None

    if profile_id is None:
        profile = await ensure_default_profile(UserProfileRepository(db_path), goal_override)
        profile_id = profile.id
        echo_info(f"Using default profile: {profile.name} (ID: {profile_id})")

    if seed is None:
        seed = get_settings().seed

    generator = build_generator(db_path, seed=seed)
    try:
        session = await generator.generate(profile_id, duration_min=duration, goal=goal_override)
    except CadenceLiftError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Session generated (ID: {session.id})")
    if session.deload:
        echo_warning("Deload session: lighter loads and fewer sets today")
    click.echo()
    click.echo(session.get_summary())
    click.echo()
    click.echo("After your workout, log how it went:")
    click.echo(f"  cadence-lift feedback {session.id} --exercise <slug> --rpe 7 --sets 3 --reps 30")

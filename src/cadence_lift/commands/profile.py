"""Profile management commands."""

import click

from ..db import UserProfileRepository, get_db_path
from ..models.exercises import EquipmentType, Limitation
from ..models.user_profile import Goal, UserProfile
from ..services.profiles import normalize_equipment
from .base import (
    EQUIPMENT_CHOICE,
    GOAL_CHOICE,
    LIMITATION_CHOICE,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
@click.pass_context
def profile(ctx):
    """Manage training profiles."""
    ensure_initialized(ctx)


@profile.command()
@click.option("--name", "-n", help="Profile name")
@click.option("--goal", "-g", type=GOAL_CHOICE, default=Goal.HYPERTROPHY.value)
@click.option("--days", "-d", type=click.IntRange(1, 7), default=3, help="Training days per week")
@click.option("--cycle", type=click.IntRange(4, 12), default=6, help="Cycle length in weeks")
@click.option("--duration", type=click.IntRange(15, 120), default=40, help="Session length in minutes")
@click.option("--equipment", "-e", type=EQUIPMENT_CHOICE, multiple=True, help="Owned equipment (repeatable)")
@click.option("--limitation", "-l", type=LIMITATION_CHOICE, multiple=True, help="Physical limitation (repeatable)")
@click.option("--exclude", "-x", multiple=True, help="Exercise slug to exclude (repeatable)")
@click.option("--interactive", "-i", is_flag=True, help="Answer a questionnaire instead")
@click.pass_context
@async_command
async def create(
    ctx,
    name: str | None,
    goal: str,
    days: int,
    cycle: int,
    duration: int,
    equipment: tuple[str, ...],
    limitation: tuple[str, ...],
    exclude: tuple[str, ...],
    interactive: bool,
):
    """Create a training profile.

    Examples:

        # Guided setup
        cadence-lift profile create --interactive

        # Strength profile with dumbbells and a pull-up bar
        cadence-lift profile create -n Alex -g strength -d 4 -e dumbbell -e pullup_bar
    """
    if interactive:
        from ..clients.manual import ManualInputClient

        new_profile = await ManualInputClient().collect_profile()
    else:
        if not name:
            echo_error("--name is required unless --interactive is used")
            ctx.exit(1)
        new_profile = UserProfile(
            name=name,
            goal=Goal(goal),
            training_days_per_week=days,
            cycle_length_weeks=cycle,
            session_duration=duration,
            available_equipment=normalize_equipment([EquipmentType(e) for e in equipment]),
            limitations=[Limitation(lim) for lim in limitation],
            excluded_exercises=list(exclude),
        )

    try:
        new_profile.validate()
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    repo = UserProfileRepository(get_db_path())
    profile_id = await repo.create(new_profile)
    echo_success(f"Profile created: {new_profile.name} (ID: {profile_id})")


@profile.command(name="list")
@async_command
async def list_profiles():
    """List all profiles."""
    repo = UserProfileRepository(get_db_path())
    profiles = await repo.list_all()

    if not profiles:
        echo_info("No profiles found. Create one with 'cadence-lift profile create'")
        return

    headers = ["ID", "Name", "Goal", "Days", "Cycle", "Duration"]
    rows = [
        [
            str(p.id),
            p.name,
            p.goal.value,
            str(p.training_days_per_week),
            f"{p.cycle_length_weeks}w",
            f"{p.session_duration}min",
        ]
        for p in profiles
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(profiles)} profile(s)")


@profile.command()
@click.argument("profile_id", type=int)
@click.pass_context
@async_command
async def show(ctx, profile_id: int):
    """Show a profile."""
    repo = UserProfileRepository(get_db_path())
    found = await repo.get(profile_id)
    if not found:
        echo_error(f"Profile ID {profile_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(found.get_summary())


@profile.command()
@click.argument("profile_id", type=int)
@click.option("--goal", "-g", type=GOAL_CHOICE)
@click.option("--days", "-d", type=click.IntRange(1, 7))
@click.option("--cycle", type=click.IntRange(4, 12))
@click.option("--duration", type=click.IntRange(15, 120))
@click.option("--equipment", "-e", type=EQUIPMENT_CHOICE, multiple=True, help="Replaces owned equipment")
@click.option("--limitation", "-l", type=LIMITATION_CHOICE, multiple=True, help="Replaces limitations")
@click.option("--clear-limitations", is_flag=True, help="Remove all limitations")
@click.option("--exclude", "-x", multiple=True, help="Replaces excluded exercise slugs")
@click.pass_context
@async_command
async def update(
    ctx,
    profile_id: int,
    goal: str | None,
    days: int | None,
    cycle: int | None,
    duration: int | None,
    equipment: tuple[str, ...],
    limitation: tuple[str, ...],
    clear_limitations: bool,
    exclude: tuple[str, ...],
):
    """Update settings of an existing profile."""
    repo = UserProfileRepository(get_db_path())
    existing = await repo.get(profile_id)
    if not existing:
        echo_error(f"Profile ID {profile_id} not found")
        ctx.exit(1)

    if goal:
        existing.goal = Goal(goal)
    if days is not None:
        existing.training_days_per_week = days
    if cycle is not None:
        existing.cycle_length_weeks = cycle
    if duration is not None:
        existing.session_duration = duration
    if equipment:
        existing.available_equipment = normalize_equipment(
            [EquipmentType(e) for e in equipment]
        )
    if clear_limitations:
        existing.limitations = []
    elif limitation:
        existing.limitations = [Limitation(lim) for lim in limitation]
    if exclude:
        existing.excluded_exercises = list(exclude)

    await repo.update(existing)
    echo_success(f"Profile {profile_id} updated")

"""Initialize project command."""

import click

from ..db import UserProfileRepository, get_db_path, init_db, seed_exercises
from ..services.profiles import ensure_default_profile
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@async_command
async def init():
    """Initialize the cadence-lift database.

    Creates the data directory, the SQLite schema, the built-in exercise
    catalog and the default profile. Safe to re-run: exercises are updated
    in place and nothing is deleted.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing cadence-lift in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    created, updated = await seed_exercises(db_path)
    echo_success(f"Exercise catalog synced ({created} new, {updated} updated)")

    profile = await ensure_default_profile(UserProfileRepository(db_path))
    echo_success(f"Default profile ready: {profile.name} (ID: {profile.id})")

    click.echo()
    click.echo("cadence-lift is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create a profile:")
    click.echo("     cadence-lift profile create --interactive")
    click.echo()
    click.echo("  2. Generate a session:")
    click.echo("     cadence-lift generate --profile-id 1 --duration 40")

"""CLI entry point for cadence-lift."""

import click

from . import __version__
from .commands import feedback, generate, init, profile, schedule, serve, sessions
from .config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="cadence-lift")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: CADENCE_LIFT_LOG_LEVEL or WARNING)",
)
def main(log_level: str | None):
    """cadence-lift: adaptive home workout generator.

    Builds each session from your equipment, limitations, training block
    and the feedback you logged after earlier sessions.

    Example usage:

        # Initialize the project
        cadence-lift init

        # Set up a profile
        cadence-lift profile create --interactive

        # Generate today's session
        cadence-lift generate --profile-id 1

        # Log how it went
        cadence-lift feedback 1 -e push-up --rpe 8 --sets 3 --reps 30
    """
    configure_logging(log_level)


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(generate)
main.add_command(feedback)
main.add_command(sessions)
main.add_command(schedule)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

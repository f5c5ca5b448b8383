"""Session history commands."""

import json

import click
import pyperclip

from ..db import SessionRepository, get_db_path
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
@click.pass_context
def sessions(ctx):
    """View generated sessions."""
    ensure_initialized(ctx)


@sessions.command(name="list")
@click.option("--profile-id", "-p", type=int, required=True, help="Profile to list sessions for")
@click.option("--limit", "-n", type=int, default=20, help="Number of sessions to show")
@async_command
async def list_sessions(profile_id: int, limit: int):
    """List recent sessions of a profile."""
    repo = SessionRepository(get_db_path())
    found = await repo.list_for_profile(profile_id, limit=limit)

    if not found:
        echo_info("No sessions found. Generate one with 'cadence-lift generate'")
        return

    headers = ["ID", "Week", "Phase", "RPE", "Exercises", "Feedback", "Created"]
    rows = [
        [
            str(s.id),
            str(s.block_week),
            s.phase.value + (" (deload)" if s.deload else ""),
            f"{s.target_rpe:g}",
            str(len(s.items)),
            str(len(s.feedback)),
            s.created_at.strftime("%Y-%m-%d %H:%M") if s.created_at else "",
        ]
        for s in found
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} session(s)")


@sessions.command()
@click.argument("session_id", type=int)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--clipboard", "-c", is_flag=True, help="Copy to clipboard instead of printing")
@click.option("--output", "-o", type=click.Path(), help="Write to file instead of stdout")
@click.pass_context
@async_command
async def show(ctx, session_id: int, format: str, clipboard: bool, output: str | None):
    """Show a session with its prescription and feedback.

    Examples:

        cadence-lift sessions show 4

        # Copy as JSON
        cadence-lift sessions show 4 --format json --clipboard
    """
    repo = SessionRepository(get_db_path())
    session = await repo.get(session_id)
    if not session:
        echo_error(f"Session ID {session_id} not found")
        ctx.exit(1)

    if format == "json":
        content = json.dumps(session.to_dict(), indent=2)
    else:
        content = session.get_summary()

    if clipboard:
        pyperclip.copy(content)
        echo_success("Copied to clipboard!")
    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Exported to {output}")
    else:
        click.echo(content)

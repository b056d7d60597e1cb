"""Initialize project command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@async_command
async def init():
    """Initialize the maxlift data directory and database.

    Safe to run again; existing lifts are kept.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing maxlift in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("maxlift is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo('  1. Log a lift:        maxlift log -e "Back Squat" -w 225 -r 5')
    click.echo("  2. See your PRs:      maxlift prs list")
    click.echo("  3. Back up your data: maxlift export -o backup.json")

"""Reset command."""

import click

from ..db.repositories import LiftRecordRepository, SettingsRepository
from ..services.maintenance import delete_all_records
from .base import async_command, echo_success, echo_warning, ensure_initialized


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Delete every lift and preference."""
    ensure_initialized(ctx)

    if not yes:
        echo_warning("This permanently deletes all logged lifts.")
        if not click.confirm("Continue?"):
            return

    removed = await delete_all_records(LiftRecordRepository())
    await SettingsRepository().clear()

    echo_success(f"Deleted {removed} lift(s) and cleared preferences")

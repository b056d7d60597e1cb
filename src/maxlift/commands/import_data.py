"""Import lifts command."""

import click

from ..db.repositories import LiftRecordRepository
from ..services.import_export import (
    LiftImportError,
    import_lifts,
    import_success_message,
)
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command(name="import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@async_command
async def import_data(ctx: click.Context, path: str):
    """Import lifts from a JSON export.

    Every lift in the file is added as a new entry; nothing is stored if the
    file is malformed.

    Example:
        maxlift import MaxLift_Backup_11-27-2025.json
    """
    ensure_initialized(ctx)

    echo_info(f"Reading {path}")
    with open(path, "rb") as f:
        document = f.read()

    try:
        count = await import_lifts(LiftRecordRepository(), document)
    except LiftImportError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(import_success_message(count))

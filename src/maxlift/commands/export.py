"""Export lifts command."""

import click

from ..db.repositories import LiftRecordRepository
from ..services.import_export import backup_filename, export_lifts
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write to file instead of stdout",
)
@click.option(
    "--backup",
    is_flag=True,
    help="Write to a dated backup file (MaxLift_Backup_MM-DD-YYYY.json)",
)
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.pass_context
@async_command
async def export(ctx: click.Context, output: str | None, backup: bool, clipboard: bool):
    """Export every lift as JSON.

    The document can be loaded back with 'maxlift import'.

    Examples:
        maxlift export

        maxlift export -o lifts.json

        maxlift export --backup
    """
    ensure_initialized(ctx)

    records = await LiftRecordRepository().all()
    content = export_lifts(records)

    if backup and not output:
        output = backup_filename()

    if clipboard:
        try:
            import pyperclip

            pyperclip.copy(content)
            echo_success(f"Copied {len(records)} lifts to clipboard!")
        except ImportError:
            echo_error("pyperclip not installed. Install with: pip install pyperclip")
            ctx.exit(1)

    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Exported {len(records)} lifts to {output}")

    else:
        click.echo(content)
        if not records:
            echo_info("No lifts to export.")

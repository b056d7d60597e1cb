"""History commands."""

import click

from ..db.repositories import LiftRecordRepository
from ..services.history import HistoryView, build_history_view, delete_from_view
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_lift_row,
    format_table,
)

HEADERS = ["#", "Date", "Exercise", "Weight", "Reps", "Notes"]


def _render(view: HistoryView) -> str:
    if not view.grouped:
        rows = [format_lift_row(i, lift) for i, lift in enumerate(view.records, start=1)]
        return format_table(HEADERS, rows)

    # Keep numbering continuous across groups so positions match `delete`
    sections = []
    position = 1
    for name, lifts in view.groups.items():
        rows = []
        for lift in lifts:
            rows.append(format_lift_row(position, lift))
            position += 1
        sections.append(click.style(name, bold=True) + "\n" + format_table(HEADERS, rows))
    return "\n\n".join(sections)


search_option = click.option(
    "--search", "-s", default="", help="Filter by exercise name or rep count"
)
group_option = click.option(
    "--group", "-g", is_flag=True, help="Group lifts by exercise"
)


@click.group()
def history():
    """Browse and prune logged lifts."""
    pass


@history.command("list")
@search_option
@group_option
@click.pass_context
@async_command
async def list_lifts(ctx: click.Context, search: str, group: bool):
    """List lifts, most recent first."""
    ensure_initialized(ctx)

    repo = LiftRecordRepository()
    records = await repo.all()

    if not records:
        echo_info("No workout history yet. Log your first lift with 'maxlift log'.")
        return

    view = build_history_view(records, search_text=search, group_by_exercise=group)
    if not view.records:
        echo_info(f"No lifts match '{search}'.")
        return

    click.echo(_render(view))


@history.command("delete")
@click.argument("positions", nargs=-1, type=click.IntRange(min=1), required=True)
@search_option
@group_option
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
@async_command
async def delete(
    ctx: click.Context,
    positions: tuple[int, ...],
    search: str,
    group: bool,
    yes: bool,
):
    """Delete lifts by their row number in 'history list'.

    Pass the same --search/--group options used for listing so the row
    numbers refer to the same view.

    Example:
        maxlift history list -s squat
        maxlift history delete 2 3 -s squat
    """
    ensure_initialized(ctx)

    repo = LiftRecordRepository()
    view = build_history_view(await repo.all(), search_text=search, group_by_exercise=group)

    indexes = [p - 1 for p in positions]
    out_of_range = [p for p in positions if p > len(view)]
    if out_of_range:
        echo_error(
            f"Row {out_of_range[0]} does not exist; the view has {len(view)} row(s)."
        )
        ctx.exit(1)

    targets = sorted(set(indexes))
    click.echo(format_table(HEADERS, [format_lift_row(i + 1, view.records[i]) for i in targets]))
    if not yes and not click.confirm(f"Delete {len(targets)} lift(s)?"):
        return

    result = await delete_from_view(repo, view, indexes)
    echo_success(f"Deleted {result.count} lift(s)")

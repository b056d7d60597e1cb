"""Personal record commands."""

import click

from ..db.repositories import LiftRecordRepository, SettingsRepository
from ..services.percentage_chart import REP_BASIS_CHOICES, build_percentage_chart
from ..services.personal_records import (
    REP_TARGETS,
    summarize_exercise,
    summarize_personal_records,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_table,
    format_weight,
)
from .chart import render_chart

lookback_option = click.option(
    "--lookback",
    "-l",
    type=click.IntRange(min=0),
    default=None,
    help="Only count lifts from the past N years (default: saved setting, 0 = all time)",
)


async def _resolve_lookback(lookback: int | None) -> int:
    if lookback is not None:
        return lookback
    return await SettingsRepository().get_pr_lookback_years()


def _no_lifts_message(lookback: int) -> str:
    if lookback > 0:
        plural = "s" if lookback > 1 else ""
        return (
            f"No lifts found in the past {lookback} year{plural}. "
            "Try adjusting your preferences or log a new workout."
        )
    return "Log your first workout to see your progress and estimated 1 Rep Maxes here."


@click.group()
def prs():
    """Personal records per exercise."""
    pass


@prs.command("list")
@lookback_option
@click.pass_context
@async_command
async def list_prs(ctx: click.Context, lookback: int | None):
    """Best one-rep max for every exercise."""
    ensure_initialized(ctx)

    lookback = await _resolve_lookback(lookback)
    summaries = summarize_personal_records(await LiftRecordRepository().all(), lookback)

    if not summaries:
        echo_info("No Personal Records Yet")
        click.echo(_no_lifts_message(lookback))
        return

    rows = [[s.exercise_name, s.get_one_rep_max_display()] for s in summaries]
    click.echo(format_table(["Exercise", "1RM"], rows))


@prs.command("show")
@click.argument("exercise")
@lookback_option
@click.option(
    "--basis",
    "-b",
    type=click.Choice([str(r) for r in REP_BASIS_CHOICES]),
    default="1",
    help="Rep max the reference chart is based on",
)
@click.pass_context
@async_command
async def show(ctx: click.Context, exercise: str, lookback: int | None, basis: str):
    """Rep maxes and reference chart for one exercise."""
    ensure_initialized(ctx)

    lookback = await _resolve_lookback(lookback)
    summary = summarize_exercise(await LiftRecordRepository().all(), exercise, lookback)

    if summary is None:
        echo_error(f"No lifts logged for '{exercise}'.")
        ctx.exit(1)

    click.echo()
    click.echo(click.style(summary.exercise_name, bold=True))
    click.echo("=" * 50)
    click.echo(f"1RM: {summary.get_one_rep_max_display()}")
    click.echo()

    rows = []
    for reps in REP_TARGETS:
        lift = summary.rep_maxes.get(reps)
        if lift:
            rows.append([f"{reps} Rep Max", format_weight(lift.weight), lift.date.strftime("%Y-%m-%d")])
        else:
            rows.append([f"{reps} Rep Max", "--", ""])
    click.echo(format_table(["", "Weight", "Date"], rows))

    click.echo()
    click.echo(click.style("Reference Chart", bold=True))
    if summary.chart_one_rep_max > 0:
        click.echo(render_chart(build_percentage_chart(summary.chart_one_rep_max, int(basis))))
    else:
        click.echo("Log a lift to see your reference chart.")

"""Percentage chart command."""

import click

from ..models.lift_record import LiftRecord
from ..services.percentage_chart import (
    REP_BASIS_CHOICES,
    PercentageRow,
    build_percentage_chart,
    chart_for_lift,
)
from .base import echo_error, format_table


def render_chart(rows: list[PercentageRow]) -> str:
    """Render chart rows as a table; rows past 100% are shown in red."""
    table_rows = [
        [f"{row.percentage}%", str(int(row.weight)), row.rep_label] for row in rows
    ]
    lines = format_table(["%", "Weight", "Reps"], table_rows).split("\n")

    # First two lines are the header and separator
    for i, row in enumerate(rows, start=2):
        if row.beyond_max:
            lines[i] = click.style(lines[i], fg="red")
    return "\n".join(lines)


@click.command()
@click.argument("one_rep_max", type=click.FloatRange(min=0), required=False)
@click.option(
    "--basis",
    "-b",
    type=click.Choice([str(r) for r in REP_BASIS_CHOICES]),
    default="1",
    help="Rep max the percentages are taken from",
)
@click.option("--weight", "-w", type=click.FloatRange(min=0), help="Build from a set: weight")
@click.option("--reps", "-r", type=int, help="Build from a set: reps")
@click.pass_context
def chart(
    ctx: click.Context,
    one_rep_max: float | None,
    basis: str,
    weight: float | None,
    reps: int | None,
):
    """Percentage chart from a one-rep max or from a single set.

    Examples:
        maxlift chart 315

        maxlift chart 315 --basis 3

        maxlift chart -w 225 -r 5
    """
    if one_rep_max is None:
        if weight is None or reps is None:
            echo_error("Give a one-rep max, or both --weight and --reps.")
            ctx.exit(1)
        try:
            rows = chart_for_lift(
                LiftRecord(exercise_name="", weight=weight, reps=reps), int(basis)
            )
        except ValueError as e:
            echo_error(str(e))
            ctx.exit(1)
    else:
        rows = build_percentage_chart(one_rep_max, int(basis))

    click.echo(render_chart(rows))

"""Log a lift command."""

from datetime import datetime

import click
import questionary
from questionary import Style

from ..db.repositories import LiftRecordRepository
from ..services.lift_entry import exercise_suggestions, log_lift
from .base import async_command, echo_error, echo_success, ensure_initialized

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _is_number(text: str) -> bool | str:
    try:
        value = float(text)
    except ValueError:
        return "Enter a number"
    return True if value >= 0 else "Must be zero or more"


def _is_whole_number(text: str) -> bool | str:
    try:
        value = int(text)
    except ValueError:
        return "Enter a whole number"
    return True if value >= 0 else "Must be zero or more"


async def _prompt_entry(
    suggestions: list[str],
    exercise: str | None,
    weight: str | None,
    reps: str | None,
    notes: str | None,
) -> tuple[str, str, str, str]:
    """Ask for whatever wasn't given on the command line."""
    if not exercise:
        exercise = await questionary.autocomplete(
            "Exercise:",
            choices=suggestions,
            style=custom_style,
        ).ask_async()
    if not weight:
        weight = await questionary.text(
            "Weight (lbs):", validate=_is_number, style=custom_style
        ).ask_async()
    if not reps:
        reps = await questionary.text(
            "Reps:", validate=_is_whole_number, style=custom_style
        ).ask_async()
    if notes is None:
        notes = await questionary.text("Notes (optional):", style=custom_style).ask_async()
    return exercise or "", weight or "", reps or "", notes or ""


@click.command()
@click.option("--exercise", "-e", help="Exercise name, e.g. 'Back Squat'")
@click.option("--weight", "-w", help="Weight in lbs")
@click.option("--reps", "-r", help="Repetitions")
@click.option("--notes", "-n", help="Free-text note")
@click.option(
    "--date",
    "-d",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]),
    help="When the lift was done (default: now)",
)
@click.pass_context
@async_command
async def log(
    ctx: click.Context,
    exercise: str | None,
    weight: str | None,
    reps: str | None,
    notes: str | None,
    date: datetime | None,
):
    """Log a lift.

    Anything not passed as an option is asked for interactively, with
    suggestions drawn from common lifts and your history.

    Examples:
        maxlift log -e "Back Squat" -w 225 -r 5

        maxlift log -e "Bench Press" -w 185 -r 1 -d 2025-11-27 -n "Paused"
    """
    ensure_initialized(ctx)

    repo = LiftRecordRepository()
    interactive = not (exercise and weight and reps)

    if interactive:
        suggestions = exercise_suggestions(await repo.all())
        exercise, weight, reps, notes = await _prompt_entry(
            suggestions, exercise, weight, reps, notes
        )

    record = await log_lift(repo, exercise or "", weight or "", reps or "", notes or "", date)
    if record is None:
        echo_error(
            "Could not log lift: need an exercise name, a weight and a whole number of reps."
        )
        ctx.exit(1)

    echo_success(f"Logged {record.get_summary()}")
